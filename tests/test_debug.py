import re

import pytest

from nclist import NClist, set_debug
from nclist.debug import debug_print, is_debug_enabled


@pytest.fixture(autouse=True)
def reset_debug():
    yield
    set_debug(False)


def test_disabled_by_default(capsys):
    assert not is_debug_enabled()
    NClist([(1, 2)])

    assert capsys.readouterr().err == ""


def test_build_diagnostics(capsys):
    set_debug(True)
    NClist([(1, 10), (2, 3), (12, 14)])

    err = capsys.readouterr().err
    assert re.match(r"\[\d\d:\d\d:\d\d\] BUILD: Built 3 intervals into 2 groups, depth 2", err)


def test_queries_are_silent(capsys):
    nclist = NClist([(1, 10), (2, 3)])
    set_debug(True)
    nclist.count_overlaps((2, 4))
    list(nclist.overlaps((2, 4)))

    assert capsys.readouterr().err == ""


def test_debug_print_tag(capsys):
    set_debug(True)
    debug_print("TEST", "hello")

    assert capsys.readouterr().err.rstrip().endswith("TEST: hello")
