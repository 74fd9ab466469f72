import os
from pathlib import Path

from ferrotext.trim import trim_path


def test_trims_prefix_and_separator():
    home = os.sep + os.path.join("home", "user")
    path = Path(home, "projects", "code")
    assert trim_path(home, path) == os.path.join("projects", "code")


def test_unrelated_path_unchanged():
    path = Path(os.sep + "var", "log")
    assert trim_path(os.sep + "home", path) == str(path)


def test_empty_start_unchanged():
    path = Path("a", "b")
    assert trim_path("", path) == str(path)


def test_repeated_prefix_is_stripped():
    assert trim_path("ab", Path("ababc")) == "c"


def test_whole_path_trimmed():
    assert trim_path("same", Path("same")) == ""