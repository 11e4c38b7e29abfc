import os

INPUT_FILE_DIRECTORY = "inputs"
OUTPUT_FILE_DIRECTORY = "outputs"
MAXIMUM_NUMBER_OF_CITIES = 1000
MAXIMUM_FLOAT_DIGITS = 5

def get_files_with_extension(directory, extension):
    """
    Get all files end with specified extension under directory
    """
    return sorted(file for file in os.listdir(directory) if file.endswith(extension))

def read_file(file):
    """
    Read all non-blank lines in file,
    each line split into a list of words
    """
    with open(file, 'r') as f:
        lines = f.readlines()
    return [line.split() for line in lines if line.strip()]

def write_to_file(file, data, mode='w'):
    """
    Write the text of a .out tour file,
    overwriting any previous solution unless mode says otherwise
    """
    with open(file, mode) as f:
        f.write(data)
