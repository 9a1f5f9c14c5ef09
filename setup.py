import sys

# required python version (3.6+)
required_python_version_major = 3
required_python_version_minor = 6

if (sys.version_info[0] < required_python_version_major or
    (sys.version_info[0] == required_python_version_major and
    sys.version_info[1] < required_python_version_minor)):
    sys.exit("CRITICAL ERROR: The python version found (version "+
        str(sys.version_info[0])+"."+str(sys.version_info[1])+") "+
        "does not match the version required (version "+
        str(required_python_version_major)+"."+
        str(required_python_version_minor)+"+)")

try:
    import setuptools
except ImportError:
    sys.exit("Please install setuptools.")

VERSION="0.1.0"
AUTHOR = "AmpSubsample Development Team"
AUTHOR_EMAIL = "ampsubsample-users@googlegroups.com"

setuptools.setup(
    name='ampsubsample',
    author=AUTHOR,
    author_email=AUTHOR_EMAIL,
    version=VERSION,
    license="MIT",
    long_description="AmpSubsample draws a random subsample of reads from a fasta or fastq " + \
        "file of sequences, optionally weighted by the abundance annotation of each " + \
        "sequence (for example dereplicated amplicons). The subsample is drawn " + \
        "without replacement in a single pass over the sequences and each sequence " + \
        "is split into the reads kept and the reads discarded.",
    keywords=['microbial','microbiome','bioinformatics','amplicon','subsampling','rarefaction','ampsubsample'],
    platforms=['Linux','MacOS'],
    packages=setuptools.find_packages(),
    package_data={
        'ampsubsample' : [
            'tests/data/*.*'
        ]},
    zip_safe=False,
    python_requires=">=3.6",
    extras_require={
        "test": ["pytest"]
    },
    classifiers=[
        "Programming Language :: Python",
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Operating System :: MacOS",
        "Operating System :: Unix",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Bio-Informatics"
        ],
    entry_points = {
        "console_scripts": [
            "ampsubsample = ampsubsample.subsample_data:main",
            "ampsubsample_test = ampsubsample.tests.ampsubsample_test:main"
        ]
    }
)
