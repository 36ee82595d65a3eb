"""Reading chromosome names (and their default order) from karyotype files.

Chromosome lines in a karyotype file look like::

    chr - hs1 1 0 249250621 chr1

Only lines whose first whitespace-separated token is exactly ``chr`` define
chromosomes. Band lines (``band ...``), comments and any other lines
(including ones merely starting with the letters ``chr``) are ignored.
"""

import logging


logger = logging.getLogger(__name__)


def read_karyotype(lines):
    """Generate the chromosome identifiers defined by a karyotype file, in the
    order they are defined.
    """
    for line in lines:
        fields = line.split()
        if len(fields) >= 3 and fields[0] == "chr":
            yield fields[2]


def load_karyotype(filename):
    """Get the list of chromosomes defined in a karyotype file.

    Raises
    ------
    IOError
        If the file cannot be read.
    """
    with open(filename, "r") as f:
        chromosomes = list(read_karyotype(f))
    logger.info("Read %d chromosomes from karyotype %s",
                len(chromosomes), filename)
    return chromosomes
