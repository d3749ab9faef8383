"""Tests for activeroute.routing.action — action identifier parsing."""

import pytest

from activeroute.routing.action import split_action, strip_controller, strip_method


class TestSplitAction:
    def test_controller_and_method(self) -> None:
        assert split_action("HomeController@getIndex") == ("HomeController", "getIndex")

    def test_qualified_controller(self) -> None:
        assert split_action("App\\Http\\Controllers\\HomeController@index") == (
            "App\\Http\\Controllers\\HomeController",
            "index",
        )

    def test_splits_on_last_separator(self) -> None:
        assert split_action("a@b@c") == ("a@b", "c")

    def test_no_separator(self) -> None:
        assert split_action("Closure") == ("Closure", None)

    def test_empty_method(self) -> None:
        assert split_action("HomeController@") == ("HomeController", "")

    def test_custom_separator(self) -> None:
        assert split_action("users.views:detail", ":") == ("users.views", "detail")


class TestStripControllerReplace:
    def test_suffix(self) -> None:
        assert strip_controller("HomeController") == "Home"

    def test_every_occurrence_removed(self) -> None:
        assert strip_controller("App\\Controllers\\PostController") == "App\\s\\Post"

    def test_no_suffix(self) -> None:
        assert strip_controller("Home") == "Home"

    def test_case_sensitive(self) -> None:
        assert strip_controller("Homecontroller") == "Homecontroller"

    def test_empty_suffix_is_noop(self) -> None:
        assert strip_controller("HomeController", "") == "HomeController"


class TestStripControllerAffix:
    def test_trailing_only(self) -> None:
        assert (
            strip_controller("App\\Controllers\\PostController", mode="affix")
            == "App\\Controllers\\Post"
        )

    def test_inner_occurrence_kept(self) -> None:
        assert strip_controller("ControllerHome", mode="affix") == "ControllerHome"


class TestStripMethodReplace:
    @pytest.mark.parametrize(
        ("method", "expected"),
        [
            ("getIndex", "Index"),
            ("getPosts", "Posts"),
            ("postStore", "Store"),
            ("putUpdate", "Update"),
            ("deleteDestroy", "Destroy"),
            ("showDetails", "Details"),
            ("index", "index"),
        ],
    )
    def test_verb_prefix(self, method: str, expected: str) -> None:
        assert strip_method(method) == expected

    def test_getshow_removes_both(self) -> None:
        assert strip_method("getshow") == ""

    def test_capitalised_show_survives(self) -> None:
        assert strip_method("getShow") == "Show"

    def test_inner_occurrences_removed(self) -> None:
        assert strip_method("showgetIndex") == "Index"
        assert strip_method("budget") == "bud"

    def test_applied_in_order(self) -> None:
        assert strip_method("gpostet") == "get"


class TestStripMethodAffix:
    def test_single_leading_prefix(self) -> None:
        assert strip_method("getIndex", mode="affix") == "Index"

    def test_only_first_prefix(self) -> None:
        assert strip_method("showgetIndex", mode="affix") == "getIndex"

    def test_inner_occurrence_kept(self) -> None:
        assert strip_method("budget", mode="affix") == "budget"

    def test_custom_prefixes(self) -> None:
        assert strip_method("editPost", ("edit",), mode="affix") == "Post"
