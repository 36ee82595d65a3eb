import pytest

from chromorder.links import \
    LinkEndpoint, LinkIndex, read_links, load_links

from chromorder.exceptions import LinkFormatError


def test_from_records_empty():
    links = LinkIndex.from_records([])
    assert len(links) == 0
    assert links.chromosomes == []
    assert links.pair_count("a", "b") == 0
    assert links.positions("a", "b") == []
    assert links.total("a") == 0


def test_from_records():
    links = LinkIndex.from_records([
        (("a", 0, 10), ("b", 100, 200)),
        (("b", 10, 20), ("a", 30, 50)),
        (("a", 0, 2), ("c", 4, 6)),
    ])

    assert links.chromosomes == ["a", "b", "c"]
    assert len(links) == 3
    assert "a" in links
    assert "d" not in links

    # Pair counts are symmetric
    assert links.pair_count("a", "b") == 2
    assert links.pair_count("b", "a") == 2
    assert links.pair_count("a", "c") == 1
    assert links.pair_count("c", "a") == 1
    assert links.pair_count("b", "c") == 0
    assert links.pair_count("a", "a") == 0

    # Positions are midpoints, as seen from each end, in record order
    assert links.positions("a", "b") == [LinkEndpoint(5.0, 150.0, "b"),
                                         LinkEndpoint(40.0, 15.0, "b")]
    assert links.positions("b", "a") == [LinkEndpoint(150.0, 5.0, "a"),
                                         LinkEndpoint(15.0, 40.0, "a")]
    assert links.positions("c", "a") == [LinkEndpoint(5.0, 1.0, "a")]

    # Totals
    assert links.total("a") == 3
    assert links.out_links("a") == 2
    assert links.in_links("a") == 1
    assert links.total("b") == 2
    assert links.out_links("b") == 1
    assert links.in_links("b") == 1
    assert links.total("c") == 1
    assert links.in_links("c") == 1
    assert links.out_links("c") == 0

    for c in links:
        assert links.total(c) == links.in_links(c) + links.out_links(c)
        assert links[c].total == links.total(c)


def test_self_links():
    # Self-links are recorded as pairs and positions but are not included in
    # the totals.
    links = LinkIndex.from_records([
        (("a", 0, 10), ("a", 100, 200)),
        (("a", 0, 10), ("b", 100, 200)),
    ])
    assert links.pair_count("a", "a") == 1
    assert links.positions("a", "a") == [LinkEndpoint(5.0, 150.0, "a"),
                                         LinkEndpoint(150.0, 5.0, "a")]
    assert links.total("a") == 1
    assert links.out_links("a") == 1
    assert links.in_links("a") == 0


def test_read_links():
    lines = [
        "# A comment\n",
        "seg1 hs1 100 200 color=red\n",
        "seg1 hs2 1000 2000\n",
        "\n",
        "seg2\ths3\t5\t7\n",
        "seg2 hs1 1 3\n",
    ]
    assert list(read_links(lines)) == [
        (("hs1", 100.0, 200.0), ("hs2", 1000.0, 2000.0)),
        (("hs3", 5.0, 7.0), ("hs1", 1.0, 3.0)),
    ]


def test_read_links_odd():
    # A trailing unpaired endpoint is dropped
    lines = [
        "seg1 hs1 100 200\n",
        "seg1 hs2 1000 2000\n",
        "seg2 hs3 5 7\n",
    ]
    assert list(read_links(lines)) == [
        (("hs1", 100.0, 200.0), ("hs2", 1000.0, 2000.0)),
    ]


@pytest.mark.parametrize("line,line_number",
                         [("seg1 hs1 100\n", 2),
                          ("seg1 hs1 abc 200\n", 2)])
def test_read_links_malformed(line, line_number):
    with pytest.raises(LinkFormatError) as excinfo:
        list(read_links(["seg0 hs1 1 2\n", line]))
    assert excinfo.value.line_number == line_number
    assert "line {}".format(line_number) in str(excinfo.value)


def test_load_links(tmpdir):
    filename = tmpdir.join("links.txt")
    filename.write("seg1 hs1 100 200\n"
                   "seg1 hs2 1000 2000\n")

    links = load_links(str(filename))
    assert links.chromosomes == ["hs1", "hs2"]
    assert links.positions("hs1", "hs2") == [
        LinkEndpoint(150.0, 1500.0, "hs2")]


def test_load_links_missing(tmpdir):
    with pytest.raises(IOError):
        load_links(str(tmpdir.join("missing.txt")))
