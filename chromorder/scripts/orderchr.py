"""A command-line utility which reorders chromosomes to reduce (or increase)
the number of crossing links drawn in a circular layout.

Installed as "chromorder" by setuptools.

Options may be collected into a file, one per line, and supplied as
``@filename``::

    $ cat orderchr.args
    --links=data/segdup.txt
    --karyotype=data/karyotype.human.txt
    --shuffle-rule=^hs
    --iterations=10000
    $ chromorder @orderchr.args
"""

import sys
import time
import random
import logging
import argparse

import chromorder

from chromorder.exceptions import InvalidConfigurationError, LinkFormatError

from chromorder.config import AnnealConfig, Optimize

from chromorder.links import load_links

from chromorder.karyotype import load_karyotype

from chromorder.selection import \
    Everything, Nothing, pattern_selector, read_order_file, select

from chromorder.anneal import anneal

from chromorder.anneal.algorithm import default_kernel, percent_change


def get_initial_order(links, karyotype=None, shuffle_order=None,
                      shuffle_rules=None):
    """Determine the chromosomes to be ordered and their initial order.

    Parameters
    ----------
    links : :py:class:`~chromorder.links.LinkIndex`
    karyotype : [chromosome, ...] or None
        If given (and no shuffle_order is given), the chromosomes and initial
        order. Otherwise the chromosomes are taken from the links in the order
        they first appear.
    shuffle_order : [chromosome, ...] or None
        An explicit list of the chromosomes to order, in their initial order.
    shuffle_rules : [regex, ...] or None
        If given, only chromosomes matching one of these expressions are
        ordered.

    Raises
    ------
    :py:exc:`~chromorder.exceptions.InvalidConfigurationError`
        If a chromosome is named more than once.
    """
    if shuffle_order is not None:
        universe = list(shuffle_order)
    elif karyotype is not None:
        universe = list(karyotype)
    else:
        universe = links.chromosomes

    order = select(universe,
                   pattern_selector(shuffle_rules) if shuffle_rules
                   else Everything)

    seen = set()
    for chromosome in order:
        if chromosome in seen:
            raise InvalidConfigurationError(
                "Chromosome {} is listed more than once.".format(chromosome))
        seen.add(chromosome)

    return order


class IterationReporter(object):
    """Prints a line of progress information for every iteration."""

    def __init__(self, initial_score):
        self.initial_score = initial_score
        self.last_time = time.time()

    def __call__(self, iteration, accepted, nflips, temperature,
                 score, best_score):
        now = time.time()
        cost = (now - self.last_time) * 1000.0
        self.last_time = now

        print(
            "iter {:7d} {:6s} flips {:3d} temp {:.6f} "
            "score {} best {} change {:+.1f}% cost {:.2f} ms".format(
                iteration, "accept" if accepted else "reject", nflips,
                temperature, score, best_score,
                percent_change(best_score, self.initial_score), cost))


def main(args=None):
    parser = argparse.ArgumentParser(
        description="Reorder chromosomes to minimise (or maximise) the "
                    "number of crossing links",
        fromfile_prefix_chars="@")
    parser.add_argument("--version", "-V", action="version",
                        version="%(prog)s {}".format(chromorder.__version__))

    parser.add_argument("--links", "-l", type=str, required=True,
                        help="link file: pairs of lines "
                             "'id chromosome start end'")
    parser.add_argument("--karyotype", "-k", type=str,
                        help="karyotype file giving the chromosomes and "
                             "their initial order")
    parser.add_argument("--shuffle-order", type=str,
                        help="file listing the chromosomes to reorder (one "
                             "per line) in their initial order")
    parser.add_argument("--shuffle-rule", "-s", type=str, action="append",
                        help="reorder only chromosomes matching the "
                             "supplied regex")
    parser.add_argument("--static-rule", "-S", type=str, action="append",
                        help="never move chromosomes matching the "
                             "supplied regex")

    parser.add_argument("--iterations", "-n", type=int, default=1000,
                        help="number of annealing iterations "
                             "(default: %(default)s)")
    parser.add_argument("--max-flips", "-f", type=int, default=5,
                        help="maximum number of swaps per iteration "
                             "(default: %(default)s)")
    parser.add_argument("--temp0", "-t", type=float, default=0.01,
                        help="initial annealing temperature "
                             "(default: %(default)s)")
    parser.add_argument("--optimize", "-o", type=str,
                        default=Optimize.minimize.value,
                        choices=[d.value for d in Optimize],
                        help="whether to minimize or maximize crossings "
                             "(default: %(default)s)")
    parser.add_argument("--seed", type=int,
                        help="seed for the random number generator")

    parser.add_argument("--verbose", "-v", action="count", default=0,
                        help="print a summary (-v), a line per iteration "
                             "(-vv) or debugging information (-vvv)")

    args = parser.parse_args(args)

    if args.verbose >= 3:
        level = logging.DEBUG
    elif args.verbose >= 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level)

    try:
        config = AnnealConfig(args.iterations, args.max_flips,
                              args.temp0, args.optimize)

        links = load_links(args.links)
        karyotype = (load_karyotype(args.karyotype)
                     if args.karyotype else None)
        if args.shuffle_order:
            with open(args.shuffle_order, "r") as f:
                shuffle_order = list(read_order_file(f))
        else:
            shuffle_order = None

        order = get_initial_order(links, karyotype, shuffle_order,
                                  args.shuffle_rule)
        static = (pattern_selector(args.static_rule)
                  if args.static_rule else Nothing)

        # Scored here as well as in anneal so it is printed before the run
        initial_score = default_kernel(links).score(order)
        print("initial score: {}".format(initial_score))
        print("initial order: {}".format(",".join(order)))

        on_iteration = (IterationReporter(initial_score)
                        if args.verbose >= 2 else None)
        result = anneal(order, links, config, static,
                        random=random.Random(args.seed),
                        on_iteration=on_iteration)
    except (IOError, OSError) as e:
        sys.stderr.write("{}: error: {}\n".format(parser.prog, e))
        return 1
    except LinkFormatError as e:
        sys.stderr.write("{}: error: {}: {}\n".format(
            parser.prog, args.links, e))
        return 1
    except InvalidConfigurationError as e:
        sys.stderr.write("{}: error: {}\n".format(parser.prog, e))
        return 2

    if args.verbose >= 1:
        print("improvement: {:+.1f}% ({} -> {})".format(
            result.improvement, result.initial_score, result.score))
    print("chromosomes_order = {}".format(",".join(result.order)))

    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
