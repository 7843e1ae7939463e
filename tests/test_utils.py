from __future__ import annotations

import os

import pytest

from gherkin_harvest import TraversalError, iter_source_files, normalize_scenario
from gherkin_harvest.utils import split_string_literal


def test_iter_source_files_lexical_and_filtered(make_tree):
    root = make_tree(
        {
            "b.py": "",
            "a.py": "",
            "c.txt": "",
            "sub/z.py": "",
            "sub/deeper/y.py": "",
            "other/x.py": "",
        }
    )
    got = [os.path.relpath(p, str(root)) for p in iter_source_files(str(root))]
    assert got == [
        "a.py",
        "b.py",
        os.path.join("other", "x.py"),
        os.path.join("sub", "z.py"),
        os.path.join("sub", "deeper", "y.py"),
    ]


def test_iter_source_files_skip_dirs(make_tree):
    root = make_tree({"keep/a.py": "", ".venv/lib/b.py": "", "build/c.py": ""})
    got = [os.path.relpath(p, str(root)) for p in iter_source_files(str(root), skip_dirs={".venv", "build"})]
    assert got == [os.path.join("keep", "a.py")]


def test_iter_source_files_visits_hidden_dirs_by_default(make_tree):
    root = make_tree({".hidden/a.py": ""})
    assert len(list(iter_source_files(str(root)))) == 1


def test_iter_source_files_empty_is_not_an_error(tmp_path):
    assert list(iter_source_files(str(tmp_path))) == []


def test_iter_source_files_base_is_a_file(tmp_path):
    f = tmp_path / "lonely.py"
    f.write_text("")
    with pytest.raises(TraversalError):
        list(iter_source_files(str(f)))


def test_iter_source_files_broken_symlink(tmp_path):
    link = tmp_path / "dangling.py"
    try:
        os.symlink(str(tmp_path / "missing_target.py"), str(link))
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported here")
    with pytest.raises(TraversalError) as ei:
        list(iter_source_files(str(tmp_path)))
    assert ei.value.path == str(link)


def test_normalize_scenario():
    assert normalize_scenario("\n\t\tGiven a\n\t\t  And b\t\n  ") == "Given a\n  And b"
    assert normalize_scenario("\t\t") == ""


@pytest.mark.parametrize(
    "token, expected",
    [
        ('"abc"', ("", '"', "abc", "")),
        ("'abc'", ("", "'", "abc", "")),
        ('"""a\nb"""', ("", '"""', "a\nb", "")),
        ("r'x\\y'", ("r", "'", "x\\y", "")),
        ('"a\\"b"', ("", '"', 'a\\"b', "")),
        ('"a" "b"', ("", '"', "a", ' "b"')),
        ('""', ("", '"', "", "")),
    ],
)
def test_split_string_literal(token, expected):
    assert split_string_literal(token) == expected


@pytest.mark.parametrize("token", ["abc", "f'x'", "b'x'", '"unterminated'])
def test_split_string_literal_rejects(token):
    assert split_string_literal(token) is None
