"""
AmpSubsample: sampling module

Weighted selection without replacement over a population of sequence groups.
Each group owns a contiguous run of virtual units (reads), one per unit of
abundance. The selection visits the units in input order and decides for each
one if it is kept, so the population is never expanded in memory.

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

import math
import logging
import collections

from ampsubsample import config

# name global logging instance
logger=logging.getLogger(__name__)

SelectionResult=collections.namedtuple("SelectionResult",
    ["counts","sample_size","mass","examined"])

PartitionEntry=collections.namedtuple("PartitionEntry",
    ["index","kept","discarded","kept_ordinal","discarded_ordinal"])

class ConfigurationError(ValueError):
    """ The options selected can not be used together or are incomplete """
    pass

class SampleSizeExceedsPopulation(ValueError):
    """ More reads were requested than are present in the population """
    pass

def get_weights(population, weighted):
    """ Return the weight of each group, the abundance if weighted otherwise one """

    if weighted:
        return [record.abundance for record in population]
    else:
        return [1]*len(population)

def total_mass(weights):
    """ Return the total number of virtual units (reads) owned by the groups """

    return sum(weights)

def check_sample_request(sample_size=None, sample_pct=None):
    """ Check exactly one of the sample size or the sample percentage is provided and in range """

    if sample_size is None and sample_pct is None:
        raise ConfigurationError("Please provide either a sample size or a sample percentage.")
    if sample_size is not None and sample_pct is not None:
        raise ConfigurationError("Please provide only one of sample size or sample percentage.")

    if sample_size is not None and sample_size < 0:
        raise ConfigurationError("The sample size must be a non-negative integer: "+str(sample_size))

    if sample_pct is not None and (math.isnan(sample_pct) or
        sample_pct < config.sample_pct_min or sample_pct > config.sample_pct_max):
        raise ConfigurationError("The sample percentage must be between "+
            str(config.sample_pct_min)+" and "+str(config.sample_pct_max)+": "+str(sample_pct))

def resolve_sample_size(mass, sample_size=None, sample_pct=None):
    """
    Return the number of reads to sample

    Exactly one of the absolute sample size or the percentage of the total
    mass must be provided. The percentage is converted with a floating point
    multiplication and truncated toward zero.
    """

    check_sample_request(sample_size, sample_pct)

    if sample_size is not None:
        return sample_size

    return int(mass * sample_pct / 100.0)

def select(weights, sample_size, rng):
    """
    Select sample_size of the virtual units without replacement

    The first weights[0] units belong to group 0, the next weights[1] to
    group 1 and so on. Each unit examined takes one draw from rng.randrange
    with the number of units not yet examined as the bound, and is selected
    if the draw is less than the number of selections still to make. Every
    subset of sample_size units is equally likely, so the counts per group
    follow the multivariate hypergeometric distribution.

    The loop stops as soon as the last selection is made.

    Returns a SelectionResult with the number of units selected from each group.
    """

    weights=list(weights)
    mass=total_mass(weights)

    if sample_size < 0:
        raise ValueError("The sample size must be a non-negative integer: "+str(sample_size))
    if sample_size > mass:
        raise SampleSizeExceedsPopulation("Cannot subsample more reads ("+str(sample_size)+
            ") than in the original sample ("+str(mass)+")")

    counts=[0]*len(weights)
    remaining=sample_size
    examined=0
    group=0
    consumed=0

    while remaining > 0:
        # move to the next group that still owns units, groups of zero weight own none
        while consumed >= weights[group]:
            group+=1
            consumed=0

        if rng.randrange(mass-examined) < remaining:
            counts[group]+=1
            remaining-=1

        examined+=1
        consumed+=1

    logger.debug("Selected %d of %d reads after examining %d reads", sample_size, mass, examined)

    return SelectionResult(counts, sample_size, mass, examined)

def partition(weights, selection):
    """
    Split the weight of each group into kept and discarded portions

    Yields a PartitionEntry for each group in input order. Kept and discarded
    ordinals are numbered from one, independently, and only count the
    groups that have a non-zero kept or discarded portion respectively.
    """

    kept_ordinal=0
    discarded_ordinal=0
    for index, (weight, kept) in enumerate(zip(weights, selection.counts)):
        discarded=weight-kept

        current_kept_ordinal=None
        if kept > 0:
            kept_ordinal+=1
            current_kept_ordinal=kept_ordinal

        current_discarded_ordinal=None
        if discarded > 0:
            discarded_ordinal+=1
            current_discarded_ordinal=discarded_ordinal

        yield PartitionEntry(index, kept, discarded, current_kept_ordinal, current_discarded_ordinal)
