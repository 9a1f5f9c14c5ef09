import os
import sys
import shutil
import subprocess
import argparse

from ampsubsample import utilities
from ampsubsample import config

def run_ampsubsample(arguments):
    """ Run the ampsubsample command, returning the exit code """

    command=[sys.executable,"-m","ampsubsample.subsample_data"]+arguments

    # find the package from this install even if it is not on the path
    package_folder=os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    environment=dict(os.environ)
    environment["PYTHONPATH"]=os.pathsep.join(filter(None,[package_folder,environment.get("PYTHONPATH")]))

    try:
        subprocess.check_output(command, stderr=subprocess.STDOUT, env=environment)
    except subprocess.CalledProcessError as e:
        return e.returncode
    return 0

def remove_temp_folder(tempdir):
    """ Remove the temp folder """

    try:
        shutil.rmtree(tempdir)
    except EnvironmentError:
        print("Warning: Unable to remove temp directory: " + tempdir)

def check_output(output_files_expected,output_folder):
    """ Check the output folder has the expected file and they are all non-zero """

    for file in output_files_expected:
        expected_file = os.path.join(output_folder,file)
        # check the file exists
        yield (os.path.isfile(expected_file), "File does not exist: " + file)

        # check the file is not empty
        yield (os.stat(expected_file).st_size > 0, "File is empty: " + file)

def read_headers(file):
    """ Return the headers of the records in the fasta or fastq file """

    return [header for header, sequence, quality in utilities.read_fastx(file)]

def read_abundances(file):
    """ Return the abundances from the headers of the records in the file """

    return [utilities.get_abundance(header) for header in read_headers(file)]

def header_options(**options):
    """ Return the header settings with defaults for those not provided """

    settings={"relabel":None,"relabel_md5":False,"relabel_sha1":False,
        "relabel_keep":False,"sizeout":False,"xsize":False,"sample":None,
        "fasta_width":config.fasta_width}
    settings.update(options)
    return argparse.Namespace(**settings)

class ScriptedRandom(object):
    """ Random number generator returning a fixed sequence of draws """

    def __init__(self, draws):
        self.draws=list(draws)
        self.bounds=[]

    def randrange(self, stop):
        draw=self.draws[len(self.bounds)]
        if draw >= stop:
            raise ValueError("Scripted draw "+str(draw)+" is not less than "+str(stop))
        self.bounds.append(stop)
        return draw

def subsample_options(**options):
    """ Return the run settings with defaults for those not provided """

    settings=vars(header_options())
    settings.update({"input":None,"sizein":False,"sample_size":None,"sample_pct":None,
        "quiet":True,"fastaout":None,"fastqout":None,"fastaout_discarded":None,
        "fastqout_discarded":None})
    settings.update(options)
    return argparse.Namespace(**settings)
