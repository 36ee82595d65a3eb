"""Test the chromorder command produces sane output."""

import pytest

import chromorder.scripts.orderchr as orderchr

from chromorder.links import LinkIndex

from chromorder.exceptions import InvalidConfigurationError


LINKS = ("l1 a 0 10\n"
         "l1 c 0 10\n"
         "l2 b 0 10\n"
         "l2 d 0 10\n")

KARYOTYPE = ("chr - a a 0 100 black\n"
             "chr - b b 0 100 black\n"
             "band b b1 b1 0 50 gneg\n"
             "chr - c c 0 100 black\n"
             "chr - d d 0 100 black\n")


@pytest.fixture
def files(tmpdir):
    links = tmpdir.join("links.txt")
    links.write(LINKS)
    karyotype = tmpdir.join("karyotype.txt")
    karyotype.write(KARYOTYPE)
    return str(links), str(karyotype)


def get_order(stdout):
    for line in stdout.splitlines():
        if line.startswith("chromosomes_order = "):
            return line[len("chromosomes_order = "):].split(",")
    assert False, "no order printed"  # pragma: no cover


def test_bad_args():
    # --links is required
    with pytest.raises(SystemExit):
        orderchr.main([])


def test_bad_optimize(files):
    links, _ = files
    with pytest.raises(SystemExit):
        orderchr.main(["--links", links, "--optimize", "sideways"])


def test_get_initial_order():
    links = LinkIndex.from_records([
        (("b", 0, 1), ("a", 0, 1)),
        (("c", 0, 1), ("a", 0, 1)),
    ])

    # From the links
    assert orderchr.get_initial_order(links) == ["b", "a", "c"]

    # From a karyotype
    assert orderchr.get_initial_order(
        links, karyotype=["a", "b", "c", "d"]) == ["a", "b", "c", "d"]

    # An explicit order takes precedence
    assert orderchr.get_initial_order(
        links, karyotype=["a", "b", "c", "d"],
        shuffle_order=["d", "c"]) == ["d", "c"]

    # Filtered by rules
    assert orderchr.get_initial_order(
        links, karyotype=["a", "b", "c", "d"],
        shuffle_rules=["a", "^c$"]) == ["a", "c"]


def test_reorder(capsys, files):
    links, karyotype = files
    assert orderchr.main(["--links", links, "--karyotype", karyotype,
                          "--iterations", "200", "--max-flips", "2",
                          "--seed", "1"]) == 0

    stdout, stderr = capsys.readouterr()
    assert "initial score: 2" in stdout
    assert "initial order: a,b,c,d" in stdout
    assert "improvement" not in stdout
    order = get_order(stdout)
    assert sorted(order) == ["a", "b", "c", "d"]

    # The crossing should have been removed: a and c are no longer on
    # opposite sides of the circle.
    assert order.index("a") % 2 != order.index("c") % 2


def test_verbose(capsys, files):
    links, karyotype = files
    assert orderchr.main(["--links", links, "--karyotype", karyotype,
                          "--iterations", "20", "--max-flips", "1",
                          "--seed", "1", "-v"]) == 0
    stdout, stderr = capsys.readouterr()
    assert "improvement: -100.0% (2 -> 0)" in stdout
    assert not any(line.startswith("iter") for line in stdout.splitlines())


def test_very_verbose(capsys, files):
    links, karyotype = files
    assert orderchr.main(["--links", links, "--karyotype", karyotype,
                          "--iterations", "20", "--max-flips", "1",
                          "--seed", "1", "-vv"]) == 0
    stdout, stderr = capsys.readouterr()
    iteration_lines = [line for line in stdout.splitlines()
                       if line.startswith("iter")]
    assert len(iteration_lines) == 20
    assert "accept" in iteration_lines[0] or "reject" in iteration_lines[0]
    assert iteration_lines[-1].endswith("ms")


def test_static_rule(capsys, files):
    links, karyotype = files
    assert orderchr.main(["--links", links, "--karyotype", karyotype,
                          "--iterations", "50", "--max-flips", "1",
                          "--static-rule", "^[ab]$",
                          "--seed", "3"]) == 0
    stdout, stderr = capsys.readouterr()
    order = get_order(stdout)
    assert order[:2] == ["a", "b"]


def test_shuffle_order_file(capsys, files, tmpdir):
    links, _ = files
    shuffle_order = tmpdir.join("order.txt")
    shuffle_order.write("d\n# comment\nc\nb\na\n")
    assert orderchr.main(["--links", links,
                          "--shuffle-order", str(shuffle_order),
                          "--iterations", "10", "--max-flips", "1"]) == 0
    stdout, stderr = capsys.readouterr()
    assert "initial order: d,c,b,a" in stdout
    assert "initial score: 2" in stdout


def test_args_from_file(capsys, files, tmpdir):
    links, karyotype = files
    args = tmpdir.join("orderchr.args")
    args.write("--links={}\n"
               "--karyotype={}\n"
               "--iterations=10\n"
               "--max-flips=1\n"
               "--optimize=maximize\n".format(links, karyotype))
    assert orderchr.main(["@" + str(args)]) == 0
    stdout, stderr = capsys.readouterr()
    assert "initial order: a,b,c,d" in stdout
    assert get_order(stdout) == ["a", "b", "c", "d"]


def test_missing_links(capsys, tmpdir):
    assert orderchr.main(["--links", str(tmpdir.join("missing.txt"))]) == 1
    stdout, stderr = capsys.readouterr()
    assert "error" in stderr
    assert "chromosomes_order" not in stdout


def test_malformed_links(capsys, tmpdir):
    links = tmpdir.join("links.txt")
    links.write("l1 a 0 10\nl1 c zero 10\n")
    assert orderchr.main(["--links", str(links)]) == 1
    stdout, stderr = capsys.readouterr()
    assert "line 2" in stderr


@pytest.mark.parametrize("args",
                         [["--iterations", "0"],
                          ["--max-flips", "0"],
                          ["--temp0", "-1"],
                          # Too many flips for four chromosomes
                          ["--iterations", "10", "--max-flips", "5"],
                          # Only one chromosome may move
                          ["--max-flips", "1", "--static-rule", "[abc]"]])
def test_invalid_configuration(capsys, files, args):
    links, karyotype = files
    assert orderchr.main(["--links", links, "--karyotype", karyotype] +
                         args) == 2
    stdout, stderr = capsys.readouterr()
    assert "error" in stderr
    assert "chromosomes_order" not in stdout


@pytest.mark.parametrize("kwargs",
                         [{"shuffle_order": ["a", "b", "a"]},
                          {"karyotype": ["a", "b", "c", "b"]}])
def test_get_initial_order_repeated(kwargs):
    links = LinkIndex.from_records([(("a", 0, 1), ("b", 0, 1))])
    with pytest.raises(InvalidConfigurationError):
        orderchr.get_initial_order(links, **kwargs)


def test_get_initial_order_repeated_but_filtered():
    # Repeats excluded by the shuffle rules are harmless
    links = LinkIndex.from_records([(("a", 0, 1), ("b", 0, 1))])
    assert orderchr.get_initial_order(
        links, shuffle_order=["a", "b", "c", "c"],
        shuffle_rules=["^[ab]$"]) == ["a", "b"]


def test_shuffle_order_file_repeated(capsys, files, tmpdir):
    links, _ = files
    shuffle_order = tmpdir.join("order.txt")
    shuffle_order.write("a\nb\nc\nd\na\n")
    assert orderchr.main(["--links", links,
                          "--shuffle-order", str(shuffle_order),
                          "--iterations", "10", "--max-flips", "1"]) == 2
    stdout, stderr = capsys.readouterr()
    assert "more than once" in stderr
    assert "chromosomes_order" not in stdout
