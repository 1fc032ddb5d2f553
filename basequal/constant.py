# highest score representable by phred+33 encoding ('~' is chr(126))
MAX_QUALITY = 93

SANGER_OFFSET = 33
ILLUMINA_OFFSET = 64
