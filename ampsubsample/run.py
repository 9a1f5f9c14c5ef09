"""
AmpSubsample: run module

Copyright (c) 2026 AmpSubsample Development Team

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
THE SOFTWARE.
"""

import logging
from contextlib import contextmanager, ExitStack

from ampsubsample import utilities
from ampsubsample import sampling
from ampsubsample import config

# name global logging instance
logger=logging.getLogger(__name__)

def log_message(message, quiet):
    """ Log the message and print it unless running quietly """

    logger.info(message)
    if not quiet:
        print(message)

def get_outputs(args):
    """ Return the output destinations selected, by name """

    outputs={}
    for name in config.all_outputs:
        file=getattr(args, name, None)
        if file:
            outputs[name]=file
    return outputs

def check_outputs(args):
    """ Check at least one output destination is selected """

    if not get_outputs(args):
        raise sampling.ConfigurationError("No output files selected, please provide at least one of: "+
            ", ".join(config.output_options[name] for name in config.all_outputs))

def check_quality(args, population):
    """ Check fastq output is only requested when the input has quality scores """

    fastq_outputs=[name for name in get_outputs(args) if name in config.quality_outputs]
    if fastq_outputs and not utilities.population_has_quality(population):
        raise sampling.ConfigurationError("Cannot write fastq output ("+
            ", ".join(config.output_options[name] for name in fastq_outputs)+
            ") with a fasta input file, lacking quality scores")

@contextmanager
def open_outputs(outputs):
    """
    Open each output file for writing, yielding the file handles by name

    All handles opened are closed when the block exits, including when an
    error occurs while opening the remaining files or while writing.
    """

    with ExitStack() as stack:
        handles={}
        for name, file in outputs.items():
            try:
                handles[name]=stack.enter_context(utilities.open_file(file,"w"))
            except EnvironmentError as e:
                message="Unable to open file for writing: " + file
                logger.critical(message)
                raise IOError(message) from e
            logger.debug("Opened output file: " + file)
        yield handles

def write_record(handles, name, record, header, args):
    """ Write the record to the output, if it is selected """

    file_handle=handles.get(name)
    if file_handle is None:
        return

    if name in config.quality_outputs:
        utilities.write_fastq_record(file_handle, header, record.sequence, record.quality)
    else:
        utilities.write_fasta_record(file_handle, header, record.sequence, args.fasta_width)

def write_partition(population, weights, selection, handles, args):
    """
    Write the kept and discarded portion of each record to the outputs

    Returns the number of kept records and the number of discarded records.
    """

    kept_records=0
    discarded_records=0
    for entry in sampling.partition(weights, selection):
        record=population[entry.index]
        if entry.kept > 0:
            kept_records+=1
            header=utilities.format_header(record, entry.kept, entry.kept_ordinal, args)
            for name in config.kept_outputs:
                write_record(handles, name, record, header, args)

        if entry.discarded > 0:
            discarded_records+=1
            header=utilities.format_header(record, entry.discarded, entry.discarded_ordinal, args)
            for name in config.discarded_outputs:
                write_record(handles, name, record, header, args)

    return kept_records, discarded_records

def subsample(args, rng):
    """
    Subsample the reads from the input file, writing the kept and discarded reads

    Returns the SelectionResult.
    """

    check_outputs(args)
    sampling.check_sample_request(args.sample_size, args.sample_pct)

    population=utilities.load_population(args.input, args.sizein)
    check_quality(args, population)

    weights=sampling.get_weights(population, args.sizein)
    mass=sampling.total_mass(weights)
    log_message("Got "+str(mass)+" reads from "+str(len(population))+" amplicons", args.quiet)
    logger.info("READ COUNT: input : "+str(mass))

    sample_size=sampling.resolve_sample_size(mass, args.sample_size, args.sample_pct)
    selection=sampling.select(weights, sample_size, rng)

    with open_outputs(get_outputs(args)) as handles:
        kept_records, discarded_records=write_partition(population, weights, selection, handles, args)

    logger.info("READ COUNT: kept : "+str(selection.sample_size))
    logger.info("READ COUNT: discarded : "+str(selection.mass-selection.sample_size))
    logger.debug("Wrote %d kept and %d discarded records", kept_records, discarded_records)
    log_message("Subsampled "+str(selection.sample_size)+" reads from "+str(kept_records)+" amplicons", args.quiet)

    return selection
