"""Tests for the command line interface."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from rankcurve.cli.app import app
from rankcurve.cli.add import parse_picks
from rankcurve.cli.rate import parse_assignment, parse_move
from rankcurve.config import Config
from rankcurve.models import Item, MediaType
from rankcurve.search import SearchResult
from rankcurve.storage import FileListStore

runner = CliRunner()


def flat(output: str) -> str:
    """Output with line wrapping undone."""
    return " ".join(output.split())


class FakeSearch:
    """Returns canned results without touching the network."""

    items = [
        Item(id=1, type=MediaType.MOVIE, title="Alien", release_date="1979-05-25"),
        Item(id=2, type=MediaType.MOVIE, title="Aliens", release_date="1986-07-18"),
        Item(id=3, type=MediaType.MOVIE, title="Alien 3", release_date="1992-05-22"),
    ]

    @classmethod
    def from_config(cls, search_config, client=None) -> "FakeSearch":
        return cls()

    def search(self, query: str, kind: MediaType) -> SearchResult:
        return SearchResult(query=query, kind=kind, success=True, items=self.items)


@pytest.fixture
def env(config_path: Path, monkeypatch: pytest.MonkeyPatch) -> dict:
    monkeypatch.setattr("rankcurve.cli.add.MediaSearch", FakeSearch)
    monkeypatch.setattr("rankcurve.cli.search.MediaSearch", FakeSearch)
    return {"RANKCURVE_CONFIG": str(config_path), "COLUMNS": "200"}


@pytest.fixture
def store(config_path: Path) -> FileListStore:
    return FileListStore(Config(config_path).lists_path)


class TestInit:
    """Tests for the init command."""

    def test_file_backend(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["init", "--config-dir", str(tmp_path / "cfg"), "--workspace", str(tmp_path / "ws")],
        )
        assert result.exit_code == 0, result.output
        assert (tmp_path / "cfg" / "config.yaml").exists()
        assert (tmp_path / "ws").is_dir()
        assert Config(tmp_path / "cfg" / "config.yaml").config.storage.backend == "file"

    def test_unknown_backend(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["init", "--config-dir", str(tmp_path), "--backend", "sqlite"])
        assert result.exit_code == 1


class TestLists:
    """Tests for list management."""

    def test_create_list_show_delete(self, env: dict, store: FileListStore) -> None:
        result = runner.invoke(app, ["lists", "create", "Films"], env=env)
        assert result.exit_code == 0, result.output
        (media_list,) = store.get_lists()

        result = runner.invoke(app, ["lists", "list"], env=env)
        assert "Films" in result.output

        result = runner.invoke(app, ["lists", "show", media_list.id], env=env)
        assert "empty" in result.output

        result = runner.invoke(app, ["lists", "delete", media_list.id, "--yes"], env=env)
        assert result.exit_code == 0
        assert store.get_lists() == []

    def test_show_missing_list(self, env: dict) -> None:
        result = runner.invoke(app, ["lists", "show", "nope"], env=env)
        assert result.exit_code == 1
        assert "not found" in flat(result.output)

    def test_missing_config(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["lists", "list"],
            env={"RANKCURVE_CONFIG": str(tmp_path / "none.yaml"), "COLUMNS": "200"},
        )
        assert result.exit_code == 1
        assert "rankcurve init" in flat(result.output)


class TestSearch:
    """Tests for the search command."""

    def test_prints_results(self, env: dict) -> None:
        result = runner.invoke(app, ["search", "alien"], env=env)
        assert result.exit_code == 0, result.output
        assert "Aliens" in result.output


class TestAdd:
    """Tests for the add command."""

    def test_sorts_picks_into_list(self, env: dict, store: FileListStore) -> None:
        media_list = store.create("Films")

        result = runner.invoke(
            app, ["add", media_list.id, "alien", "--pick", "1,2"], env=env, input="1\n"
        )

        assert result.exit_code == 0, result.output
        assert [item.id for item in store.load(media_list.id).items] == [2, 1]

    def test_skips_items_already_listed(self, env: dict, store: FileListStore) -> None:
        media_list = store.create("Films")
        runner.invoke(app, ["add", media_list.id, "alien", "--pick", "1"], env=env)

        result = runner.invoke(app, ["add", media_list.id, "alien", "--pick", "1"], env=env)

        assert result.exit_code == 0
        assert "already in the list" in flat(result.output)
        assert len(store.load(media_list.id).items) == 1

    def test_bad_pick(self, env: dict, store: FileListStore) -> None:
        media_list = store.create("Films")
        result = runner.invoke(app, ["add", media_list.id, "alien", "--pick", "9"], env=env)
        assert result.exit_code == 1


class TestRate:
    """Tests for the rate command."""

    @pytest.fixture
    def films(self, store: FileListStore, make_ranked) -> str:
        media_list = store.create("Films")
        store.save_items(media_list.id, make_ranked([None, None, None]))
        return media_list.id

    def test_seeds_and_saves(self, env: dict, store: FileListStore, films: str) -> None:
        result = runner.invoke(app, ["rate", films], env=env)
        assert result.exit_code == 0, result.output
        assert [item.rating for item in store.load(films).items] == [5.0, 3.0, 0.5]

    def test_set_and_swap(self, env: dict, store: FileListStore, films: str) -> None:
        result = runner.invoke(app, ["rate", films, "--set", "2=3.5", "--swap", "1:down"], env=env)
        assert result.exit_code == 0, result.output

        items = store.load(films).items
        assert [item.id for item in items] == [2, 1, 3]
        assert [item.rating for item in items] == [5.0, 3.5, 0.5]
        assert [item.rank for item in items] == [2, 1, 0]

    def test_dry_run(self, env: dict, store: FileListStore, films: str) -> None:
        result = runner.invoke(app, ["rate", films, "--dry-run"], env=env)
        assert result.exit_code == 0
        assert all(item.rating is None for item in store.load(films).items)

    def test_new_mean_keeps_rated_list(self, env: dict, store: FileListStore, make_ranked) -> None:
        media_list = store.create("Rated")
        store.save_items(media_list.id, make_ranked([4.0, 3.0, 2.0]))

        result = runner.invoke(app, ["rate", media_list.id, "--mean", "4"], env=env)
        assert result.exit_code == 0, result.output
        assert "pass --reset to re-fit the curve" in flat(result.output)
        assert [item.rating for item in store.load(media_list.id).items] == [4.0, 3.0, 2.0]

    def test_new_mean_with_reset_refits(self, env: dict, store: FileListStore, make_ranked) -> None:
        media_list = store.create("Rated")
        store.save_items(media_list.id, make_ranked([4.0, 3.0, 2.0]))

        result = runner.invoke(app, ["rate", media_list.id, "--mean", "4", "--reset"], env=env)
        assert result.exit_code == 0, result.output
        assert "pass --reset" not in flat(result.output)
        assert [item.rating for item in store.load(media_list.id).items] == [5.0, 4.0, 0.5]

    def test_needs_two_items(self, env: dict, store: FileListStore, make_ranked) -> None:
        media_list = store.create("Tiny")
        store.save_items(media_list.id, make_ranked([None]))
        result = runner.invoke(app, ["rate", media_list.id], env=env)
        assert result.exit_code == 1

    def test_bad_curve(self, env: dict, films: str) -> None:
        result = runner.invoke(app, ["rate", films, "--mean", "9"], env=env)
        assert result.exit_code == 1


class TestParsers:
    """Tests for option parsing helpers."""

    def test_parse_picks(self) -> None:
        assert parse_picks("3, 1,3", 3) == [2, 0]

    @pytest.mark.parametrize("picks", ["0", "4", "x"])
    def test_parse_picks_rejects(self, picks: str) -> None:
        with pytest.raises(ValueError):
            parse_picks(picks, 3)

    def test_parse_assignment(self) -> None:
        assert parse_assignment("2=4.25") == (1, 4.25)
        with pytest.raises(ValueError):
            parse_assignment("2:4")

    def test_parse_move(self) -> None:
        assert parse_move("3:up") == (2, -1)
        assert parse_move("1:DOWN") == (0, 1)
        with pytest.raises(ValueError):
            parse_move("1:left")
