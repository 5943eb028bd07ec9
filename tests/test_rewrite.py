"""Tests for file and tree rewriting."""

import pytest
from pathlib import Path
from unittest.mock import patch
from chainwind.config.settings import App
from chainwind.lib.rewrite import file_rewrite, files_find, tree_rewrite


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """A small project tree with eligible, ineligible and excluded files."""
    root = tmp_path / "src"
    (root / "components").mkdir(parents=True)
    (root / "node_modules" / "lib").mkdir(parents=True)
    (root / "index.html").write_text('<div class="hover:a|b">x</div>\n')
    (root / "components" / "App.tsx").write_text(
        'export const App = () => <p className="md:p-2|p-4">{a | b}</p>\n'
    )
    (root / "components" / "plain.ts").write_text("const x = a | b\n")
    (root / "style.css").write_text(".a { color: red }\n")
    (root / "node_modules" / "lib" / "index.js").write_text('c="hover:a|b"\n')
    return root


def test_files_find_skips_excluded(source_tree: Path):
    found = [p.relative_to(source_tree).as_posix() for p in files_find(source_tree)]
    assert found == [
        "components/App.tsx",
        "components/plain.ts",
        "index.html",
        "style.css",
    ]


def test_file_rewrite_in_place(source_tree: Path):
    path = source_tree / "index.html"
    result = file_rewrite(path)
    assert result.status
    assert result.eligible
    assert result.changed
    assert result.output == path
    assert path.read_text() == '<div class="hover:a hover:b">x</div>\n'


def test_file_rewrite_check_does_not_write(source_tree: Path):
    path = source_tree / "index.html"
    result = file_rewrite(path, check=True)
    assert result.changed
    assert path.read_text() == '<div class="hover:a|b">x</div>\n'


def test_file_rewrite_copies_unchanged_file(source_tree: Path, tmp_path: Path):
    target = tmp_path / "out" / "style.css"
    result = file_rewrite(source_tree / "style.css", target)
    assert result.status
    assert not result.eligible
    assert not result.changed
    assert target.read_text() == ".a { color: red }\n"


def test_file_rewrite_invalid_utf8(tmp_path: Path):
    path = tmp_path / "bad.html"
    path.write_bytes(b"\xff\xfe hover:a|b")
    result = file_rewrite(path)
    assert not result.status
    assert "UTF-8" in result.message


def test_file_rewrite_write_error(source_tree: Path):
    with patch.object(Path, "write_text", side_effect=PermissionError("denied")):
        result = file_rewrite(source_tree / "index.html")
    assert not result.status
    assert "denied" in result.message


@pytest.mark.asyncio
async def test_tree_rewrite_to_output(source_tree: Path, tmp_path: Path):
    outputdir = tmp_path / "out"
    results = await tree_rewrite(source_tree, outputdir)

    assert all(r.status for r in results)
    changed = {r.path.relative_to(source_tree).as_posix() for r in results if r.changed}
    assert changed == {"index.html", "components/App.tsx"}

    assert (outputdir / "index.html").read_text() == (
        '<div class="hover:a hover:b">x</div>\n'
    )
    assert (outputdir / "components" / "App.tsx").read_text() == (
        'export const App = () => <p className="md:p-2 md:p-4">{a | b}</p>\n'
    )
    assert (outputdir / "components" / "plain.ts").read_text() == "const x = a | b\n"
    assert (outputdir / "style.css").exists()
    assert not (outputdir / "node_modules").exists()
    # Input tree is left alone
    assert (source_tree / "index.html").read_text() == '<div class="hover:a|b">x</div>\n'


@pytest.mark.asyncio
async def test_tree_rewrite_in_place(source_tree: Path):
    results = await tree_rewrite(source_tree)
    assert sum(r.changed for r in results) == 2
    assert (source_tree / "index.html").read_text() == (
        '<div class="hover:a hover:b">x</div>\n'
    )
    assert (source_tree / "node_modules" / "lib" / "index.js").read_text() == (
        'c="hover:a|b"\n'
    )


@pytest.mark.asyncio
async def test_tree_rewrite_check(source_tree: Path, tmp_path: Path):
    outputdir = tmp_path / "out"
    results = await tree_rewrite(source_tree, outputdir, check=True)
    assert sum(r.changed for r in results) == 2
    assert not outputdir.exists()


@pytest.mark.asyncio
async def test_tree_rewrite_custom_settings(source_tree: Path):
    settings = App(excludeDirs=["components", "node_modules"])
    results = await tree_rewrite(source_tree, check=True, settings=settings)
    assert {r.path.name for r in results} == {"index.html", "style.css"}
