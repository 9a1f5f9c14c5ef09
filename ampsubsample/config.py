"""
AmpSubsample: config module

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

# Default settings for command line arguments
log_level_choices=["DEBUG","INFO","WARNING","ERROR","CRITICAL"]
log_level=log_level_choices[1]

# a seed of zero requests a new, non-reproducible seed for each run
randseed=0

# sequence line width for fasta output, zero writes each sequence on one line
fasta_width=80

sample_pct_min=0.0
sample_pct_max=100.0

# abundance annotation in sequence headers, for example ">seq1;size=25"
abundance_attribute="size"
sample_attribute="sample"
header_attribute_delimiter=";"
default_abundance=1

# output destinations, kept and discarded, with and without quality scores
kept_outputs=["fastaout","fastqout"]
discarded_outputs=["fastaout_discarded","fastqout_discarded"]
quality_outputs=["fastqout","fastqout_discarded"]
all_outputs=kept_outputs+discarded_outputs

# the command line option for each output destination
output_options={
    "fastaout":"--fastaout", "fastqout":"--fastqout",
    "fastaout_discarded":"--fastaout-discarded", "fastqout_discarded":"--fastqout-discarded"}

# File extensions
gzip_file_extension=".gz"
bzip2_file_extension=".bz2"

fasta_header_start=">"
fastq_header_start="@"
fastq_separator="+"
fastq_lines_per_record=4
