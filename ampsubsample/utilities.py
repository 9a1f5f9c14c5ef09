"""
AmpSubsample: utilities module

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

import os
import sys
import re
import gzip
import bz2
import hashlib
import logging
import collections

from ampsubsample import config

# name global logging instance
logger=logging.getLogger(__name__)

SequenceRecord=collections.namedtuple("SequenceRecord",
    ["header","sequence","quality","abundance"])

abundance_pattern=re.compile("(^|;)"+config.abundance_attribute+"=([0-9]+)(;|$)")

def is_file_readable(file, exit_on_error=None):
    """ Check that the file exists and is readable """

    error_message=""
    # check the file exists
    if os.path.exists(file):
        # check for read access
        if not os.access(file, os.R_OK):
            error_message="ERROR: File is not readable: " + file
    else:
        error_message="ERROR: File does not exist: " + file

    if error_message:
        logger.critical(error_message)
        if exit_on_error:
            sys.exit(error_message)
        else:
            raise IOError(error_message)

    return True

def open_file(file, mode="r"):
    """ Open a plain, gzipped or bzip2 compressed file in text mode """

    if file.endswith(config.gzip_file_extension):
        return gzip.open(file, mode+"t")
    elif file.endswith(config.bzip2_file_extension):
        return bz2.open(file, mode+"t")
    else:
        return open(file, mode)

def get_file_format(file):
    """ Determine the format of the file """

    format="unknown"
    file_handle=None

    # check the file exists and is readable
    if not os.path.isfile(file):
        logger.critical("The input file selected is not a file: %s.",file)

    if not os.access(file, os.R_OK):
        logger.critical("The input file selected is not readable: %s.",file)

    try:
        file_handle = open_file(file)
        # skip any blank lines before the first record
        first_line = file_handle.readline()
        while first_line and not first_line.strip():
            first_line = file_handle.readline()
        second_line = file_handle.readline()
    except EnvironmentError:
        # if unable to open and read the file, return unknown
        return "unknown"
    finally:
        if file_handle:
            file_handle.close()

    if not first_line.strip():
        return "empty"

    # check that second line is only nucleotides or amino acids (gaps allowed)
    if re.search("^[A-Za-z.*-]*$", second_line.rstrip("\r\n")):
        # check first line to determine fasta or fastq format
        if first_line.startswith(config.fastq_header_start):
            format="fastq"
        if first_line.startswith(config.fasta_header_start):
            format="fasta"

    return format

def read_file_n_lines(file,n):
    """ Read a file n lines at a time """

    line_set=[]
    started=False
    with open_file(file) as file_handle:
        for line in file_handle:
            # skip blank lines before the first record
            if not started and not line.strip():
                continue
            started=True
            if len(line_set) == n:
                yield line_set
                line_set=[]
            line_set.append(line)

    # yield the last set
    if len(line_set) == n:
        yield line_set
    elif "".join(line_set).strip():
        raise IOError("Truncated record at the end of file: " + file)

def read_fasta(file):
    """ Yield the header, sequence and quality (None) for each fasta record """

    header=None
    sequence=[]
    with open_file(file) as file_handle:
        for line in file_handle:
            line=line.rstrip("\r\n")
            if line.startswith(config.fasta_header_start):
                if header is not None:
                    yield header, "".join(sequence), None
                header=line[1:]
                sequence=[]
            elif header is not None:
                sequence.append(line.strip())
            elif line.strip():
                raise IOError("Sequence found before the first header in fasta file: " + file)

    # flush the last record
    if header is not None:
        yield header, "".join(sequence), None

def read_fastq(file):
    """ Yield the header, sequence and quality for each fastq record """

    for lines in read_file_n_lines(file,config.fastq_lines_per_record):
        header, sequence, separator, quality = [line.rstrip("\r\n") for line in lines]
        if not header.startswith(config.fastq_header_start) or not separator.startswith(config.fastq_separator):
            raise IOError("Malformed fastq record in file " + file + " : " + header)
        if len(sequence) != len(quality):
            raise IOError("Sequence and quality lengths differ for fastq record in file " +
                file + " : " + header)
        yield header[1:], sequence, quality

def read_fastx(file):
    """ Read the records from a fasta or fastq file """

    format=get_file_format(file)
    if format == "fastq":
        return read_fastq(file)
    elif format == "fasta":
        return read_fasta(file)
    elif format == "empty":
        return iter([])

    raise IOError("Unable to determine the format of the input file, please provide " +
        "a fasta or fastq file: " + file)

def get_abundance(header):
    """ Return the abundance from the size annotation in the header """

    match=abundance_pattern.search(header)
    if match:
        return int(match.group(2))
    return config.default_abundance

def strip_abundance(header):
    """ Remove the size annotation from the header """

    fields=[field for field in header.split(config.header_attribute_delimiter)
        if not re.match("^"+config.abundance_attribute+"=[0-9]+$", field)]

    return config.header_attribute_delimiter.join(fields).rstrip(config.header_attribute_delimiter)

def add_attribute(header, name, value):
    """ Append the name=value annotation to the header """

    return (header.rstrip(config.header_attribute_delimiter)+
        config.header_attribute_delimiter+name+"="+str(value))

def load_population(file, sizein):
    """
    Read all of the sequence records from the file

    The abundance is read from the size annotations if sizein is set,
    otherwise each record has an abundance of one.
    """

    population=[]
    for header, sequence, quality in read_fastx(file):
        if sizein:
            abundance=get_abundance(header)
        else:
            abundance=config.default_abundance
        population.append(SequenceRecord(header, sequence, quality, abundance))

    logger.debug("Read %d records from file: %s", len(population), file)

    return population

def population_has_quality(population):
    """ Return true if every record has quality scores """

    return all(record.quality is not None for record in population)

def format_header(record, abundance, ordinal, args):
    """ Build the header for a record written with the abundance and ordinal provided """

    relabelled=True
    if args.relabel_sha1:
        header=hashlib.sha1(record.sequence.upper().encode("utf-8")).hexdigest()
    elif args.relabel_md5:
        header=hashlib.md5(record.sequence.upper().encode("utf-8")).hexdigest()
    elif args.relabel is not None:
        header=args.relabel+str(ordinal)
    else:
        relabelled=False
        header=record.header
        if args.sizeout or args.xsize:
            header=strip_abundance(header)

    if args.sample:
        header=add_attribute(header, config.sample_attribute, args.sample)

    if args.sizeout:
        header=add_attribute(header, config.abundance_attribute, abundance)

    if relabelled and args.relabel_keep:
        header+=" "+record.header

    return header

def write_fasta_record(file_handle, header, sequence, width=config.fasta_width):
    """ Write a fasta record, wrapping the sequence at the width (zero for no wrapping) """

    file_handle.write(config.fasta_header_start+header+"\n")
    if width > 0:
        for start in range(0, len(sequence), width):
            file_handle.write(sequence[start:start+width]+"\n")
    else:
        file_handle.write(sequence+"\n")

def write_fastq_record(file_handle, header, sequence, quality):
    """ Write a fastq record """

    file_handle.write(config.fastq_header_start+header+"\n"+sequence+"\n"+
        config.fastq_separator+"\n"+quality+"\n")
