"""
Property-based tests for scanner pruning on randomly generated trees.

Pruning only saves work: turning it off must never change which entries are
included or excluded.
"""

import tempfile
from pathlib import Path

from hypothesis import given, settings
from hypothesis import strategies as st

from dirscan.core.directory_scanner import DirectoryScanner
from tests.support.fs_utils import create_files, native

# Strategies for generating test data

dir_name = st.sampled_from(["a", "b", "sub"])
file_name = st.sampled_from(["x.txt", "y.dat", "Z.TXT"])

pattern = st.sampled_from(
    [
        "**/*.txt",
        "**/*.TXT",
        "a/**",
        "*/x.txt",
        "**/sub/*",
        "a/b/**/*.dat",
        "**/Z.TXT",
        "b/",
        "sub",
        "?/y.dat",
        "%ant[a/*/sub/**]",
        "%regex[a/.*]",
        "%regex[.*sub/[^/]+]",
    ]
)


@st.composite
def tree_strategy(draw):
    """Generate relative file paths up to four directories deep."""
    paths = set()
    for _ in range(draw(st.integers(min_value=1, max_value=12))):
        dirs = draw(st.lists(dir_name, min_size=0, max_size=4))
        paths.add("/".join([*dirs, draw(file_name)]))
    return sorted(paths)


@given(
    tree=tree_strategy(),
    includes=st.lists(pattern, max_size=3),
    excludes=st.lists(pattern, max_size=2),
    case_sensitive=st.booleans(),
)
@settings(max_examples=100, deadline=None)
def test_pruning_never_changes_included_or_excluded(tree, includes, excludes, case_sensitive):
    with tempfile.TemporaryDirectory() as tmpdir:
        base = Path(tmpdir)
        create_files(base, *tree)

        def run(prune):
            return DirectoryScanner(
                basedir=base,
                includes=includes,
                excludes=excludes,
                case_sensitive=case_sensitive,
                prune=prune,
            ).scan()

        pruned = run(True)
        unpruned = run(False)

        assert pruned.included_files == unpruned.included_files
        assert pruned.included_directories == unpruned.included_directories
        assert pruned.excluded_files == unpruned.excluded_files
        assert pruned.excluded_directories == unpruned.excluded_directories


@given(tree=tree_strategy(), includes=st.lists(pattern, max_size=3))
@settings(max_examples=50, deadline=None)
def test_default_excludes_are_noop_without_vcs_artifacts(tree, includes):
    with tempfile.TemporaryDirectory() as tmpdir:
        base = Path(tmpdir)
        create_files(base, *tree)

        with_defaults = DirectoryScanner(basedir=base, includes=includes).scan()
        without_defaults = DirectoryScanner(
            basedir=base, includes=includes, use_default_excludes=False
        ).scan()

        assert with_defaults == without_defaults


@given(tree=tree_strategy())
@settings(max_examples=50, deadline=None)
def test_no_patterns_includes_every_file(tree):
    with tempfile.TemporaryDirectory() as tmpdir:
        base = Path(tmpdir)
        create_files(base, *tree)

        result = DirectoryScanner(basedir=base).scan()

        assert list(result.included_files) == sorted(native(p) for p in tree)
        assert result.everything_included


@given(
    tree=tree_strategy(),
    includes=st.lists(pattern, max_size=3),
    excludes=st.lists(pattern, max_size=2),
)
@settings(max_examples=50, deadline=None)
def test_each_visited_entry_lands_in_exactly_one_list(tree, includes, excludes):
    with tempfile.TemporaryDirectory() as tmpdir:
        base = Path(tmpdir)
        create_files(base, *tree)

        result = DirectoryScanner(basedir=base, includes=includes, excludes=excludes).scan()

        file_lists = [result.included_files, result.excluded_files, result.not_included_files]
        dir_lists = [
            result.included_directories,
            result.excluded_directories,
            result.not_included_directories,
        ]
        for lists in (file_lists, dir_lists):
            seen = [entry for entries in lists for entry in entries]
            assert len(seen) == len(set(seen))
