#!/usr/bin/env python

"""
AmpSubsample

AmpSubsample draws a random subsample of reads from a fasta or fastq file of
sequences, optionally weighted by the abundance annotation of each sequence
(for example dereplicated amplicons with ";size=N" in the header). Each
sequence is split into the reads kept in the subsample and the reads
discarded, and either or both portions are written to fasta or fastq files.

To Run: ampsubsample -i <input.fasta> --fastaout <output.fasta> --sample-size <n>

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

import sys
import os
import logging
import argparse
import random
import math

# Try to load one of the ampsubsample modules to check the installation
try:
    from ampsubsample import utilities
except ImportError:
    sys.exit("ERROR: Unable to find the ampsubsample python package." +
        " Please check your install.")

from ampsubsample import run
from ampsubsample import sampling
from ampsubsample import config

VERSION="0.1.0"

# name global logging instance
logger=logging.getLogger(__name__)

def parse_non_negative_int(string):
    try:
        val = int(string)
    except ValueError:
        raise argparse.ArgumentTypeError("Unable to parse %s to int" %string)
    if val < 0:
        raise argparse.ArgumentTypeError("%s is not a non-negative integer" %string)
    return val

def parse_percentage(string):
    try:
        val = float(string)
    except ValueError:
        raise argparse.ArgumentTypeError("Unable to parse %s to float" %string)
    if math.isnan(val) or val < config.sample_pct_min or val > config.sample_pct_max:
        raise argparse.ArgumentTypeError("%s is not a percentage between %s and %s"
            %(string, config.sample_pct_min, config.sample_pct_max))
    return val

def parse_arguments(args):
    """
    Parse the arguments from the user
    """

    parser = argparse.ArgumentParser(
        description= "AmpSubsample\n",
        formatter_class=argparse.RawTextHelpFormatter,
        prog="ampsubsample")
    group1 = parser.add_argument_group("global options")
    group1.add_argument(
        "--version",
        action="version",
        version="%(prog)s v"+VERSION)
    group1.add_argument(
        "-i", "--input",
        help="input fasta or fastq file (optionally gzip or bzip2 compressed)",
        required=True)
    group1.add_argument(
        "--randseed",
        type=parse_non_negative_int,
        default=config.randseed,
        help="seed for the random number generator, 0 to use a new seed for each run\n[ DEFAULT : "+str(config.randseed)+" ]")
    group1.add_argument(
        "--quiet",
        action="store_true",
        help="do not print messages")
    group1.add_argument(
        "--log-level",
        default=config.log_level,
        choices=config.log_level_choices,
        help="level of log messages\n[ DEFAULT : "+config.log_level+" ]")
    group1.add_argument(
        "--log",
        help="log file\n[ DEFAULT : messages are not logged ]")

    group2 = parser.add_argument_group("sample size arguments")
    sample_group = group2.add_mutually_exclusive_group(required=True)
    sample_group.add_argument(
        "--sample-size",
        type=parse_non_negative_int,
        help="number of reads to sample")
    sample_group.add_argument(
        "--sample-pct",
        type=parse_percentage,
        help="percentage of the reads to sample ("+str(config.sample_pct_min)+" to "+str(config.sample_pct_max)+")")
    group2.add_argument(
        "--sizein",
        action="store_true",
        help="weight each sequence by the abundance in its header (;size=N)\n[ DEFAULT : each sequence is one read ]")

    group3 = parser.add_argument_group("output arguments")
    group3.add_argument(
        "--fastaout",
        help="fasta file for the reads sampled")
    group3.add_argument(
        "--fastqout",
        help="fastq file for the reads sampled")
    group3.add_argument(
        "--fastaout-discarded",
        dest="fastaout_discarded",
        help="fasta file for the reads not sampled")
    group3.add_argument(
        "--fastqout-discarded",
        dest="fastqout_discarded",
        help="fastq file for the reads not sampled")
    group3.add_argument(
        "--fasta-width",
        type=parse_non_negative_int,
        default=config.fasta_width,
        help="width of the sequence lines in fasta output, 0 for no wrapping\n[ DEFAULT : "+str(config.fasta_width)+" ]")

    group4 = parser.add_argument_group("header arguments")
    group4.add_argument(
        "--sizeout",
        action="store_true",
        help="write the abundance sampled (or discarded) to the headers (;size=N)")
    group4.add_argument(
        "--xsize",
        action="store_true",
        help="remove the abundance annotations from the headers")
    relabel_group = group4.add_mutually_exclusive_group()
    relabel_group.add_argument(
        "--relabel",
        help="relabel the sequences with this prefix and a ticker")
    relabel_group.add_argument(
        "--relabel-md5",
        action="store_true",
        help="relabel the sequences with the md5 digest of the sequence")
    relabel_group.add_argument(
        "--relabel-sha1",
        action="store_true",
        help="relabel the sequences with the sha1 digest of the sequence")
    group4.add_argument(
        "--relabel-keep",
        action="store_true",
        help="keep the original header after the new label")
    group4.add_argument(
        "--sample",
        help="add a sample annotation to the headers (;sample=LABEL)")

    return parser.parse_args(args[1:])

def update_configuration(args):
    """ Update the run settings based on the arguments provided """

    # check the input file is readable
    args.input = os.path.abspath(args.input)
    utilities.is_file_readable(args.input,exit_on_error=True)

    # get the full path for the output files
    for name in config.all_outputs:
        if getattr(args, name):
            setattr(args, name, os.path.abspath(getattr(args, name)))

    return args

def setup_logging(args):
    """ Set up the log file """

    if not args.log:
        logging.getLogger("ampsubsample").addHandler(logging.NullHandler())
        return

    # configure the logger
    logging.basicConfig(filename=args.log,format='%(asctime)s - %(name)s - %(levelname)s: %(message)s',
        level=getattr(logging,args.log_level), filemode='w', datefmt='%m/%d/%Y %I:%M:%S %p')

    # write the version of the software to the log
    logger.info("Running ampsubsample v"+VERSION)

    # write out all of the argument settings
    message="Running with the following arguments: \n"
    for key,value in vars(args).items():
        message+=key+" = "+str(value)+"\n"
    logger.debug(message)

def get_random_generator(seed):
    """ Return the random number generator for the seed, a new seed is used if zero """

    if seed:
        return random.Random(seed)
    return random.Random()

def main():
    # Parse the arguments from the user
    args = parse_arguments(sys.argv)

    # Update the configuration
    args = update_configuration(args)

    # Start logging
    setup_logging(args)

    rng = get_random_generator(args.randseed)

    try:
        run.subsample(args, rng)
    except (sampling.ConfigurationError, sampling.SampleSizeExceedsPopulation, EnvironmentError) as e:
        message=str(e)
        logger.critical(message)
        sys.exit("CRITICAL ERROR: " + message)

if __name__ == '__main__':
    main()
