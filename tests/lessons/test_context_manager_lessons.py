"""Tests for primer.lessons.context_managers."""

import pytest

from primer.lessons.context_managers import ManagedResource, tag


def test_managed_resource_releases_on_success(capsys):
    with ManagedResource("db") as res:
        assert res.name == "db"
    assert capsys.readouterr().out.splitlines() == ["Acquiring db", "Releasing db"]


def test_managed_resource_releases_and_propagates(capsys):
    with pytest.raises(KeyError):
        with ManagedResource("cache"):
            raise KeyError("gone")
    assert capsys.readouterr().out.splitlines() == [
        "Acquiring cache",
        "Releasing cache after KeyError",
    ]


def test_tag_closes_even_on_error(capsys):
    with pytest.raises(RuntimeError):
        with tag("div"):
            raise RuntimeError
    assert capsys.readouterr().out.splitlines() == ["<div>", "</div>"]
