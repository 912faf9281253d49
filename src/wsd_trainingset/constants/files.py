"""File extension and path template constants."""

# Corpus file extensions
EXT_TXT = ".txt"
EXT_GZ = ".gz"
EXT_PARSED = ".parsed"

# Output layout: <output_dir>/unlabelled/<word>-trainingset.csv
DIR_UNLABELLED = "unlabelled"
TEMPLATE_TRAININGSET = "-trainingset.csv"

# Resources under data_path
LEXICON_FILENAME = "ambiguous_nouns.csv"
UNDESIRABLES_FILENAME = "undesirables.txt"
