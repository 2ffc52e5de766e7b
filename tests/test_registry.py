"""Tests for roost.routing.registry — discovery, compilation and ordering."""

from collections.abc import Callable
from pathlib import Path
from types import SimpleNamespace

import pytest

from roost.config import ResolverConfig
from roost.errors import ConfigurationError, RouteLoadError
from roost.routing.pattern import compile_template
from roost.routing.registry import build_routes, compile_route, derive_path, sort_routes
from roost.routing.route import CompiledRoute, HandlerKind

RouteTree = Callable[[dict[str, str]], Path]

GET_OK = "def GET(ctx):\n    return 'ok'\n"


def _ranked(name: str, priority: int | None) -> CompiledRoute:
    return CompiledRoute(path=f"/{name}", pattern=compile_template(f"/{name}"), priority=priority)


class TestDerivePath:
    def test_top_level(self, tmp_path: Path) -> None:
        assert derive_path(tmp_path / "users.py", tmp_path) == "/users"

    def test_nested(self, tmp_path: Path) -> None:
        assert derive_path(tmp_path / "api" / "v1" / "items.py", tmp_path) == "/api/v1/items"

    def test_marker_file(self, tmp_path: Path) -> None:
        assert derive_path(tmp_path / "users" / ":id.py", tmp_path) == "/users/:id"

    def test_only_last_extension_stripped(self, tmp_path: Path) -> None:
        assert derive_path(tmp_path / "feed.xml.py", tmp_path) == "/feed.xml"


class TestSortRoutes:
    def test_descending(self) -> None:
        ordered = sort_routes([_ranked("low", -1), _ranked("high", 5), _ranked("mid", None)])
        assert [r.path for r in ordered] == ["/high", "/mid", "/low"]

    def test_stable_ties(self) -> None:
        a, b, c = _ranked("a", 1), _ranked("b", 1), _ranked("c", 2)
        assert sort_routes([a, b, c]) == (c, a, b)

    def test_unset_ties_with_zero(self) -> None:
        a, b, c = _ranked("a", None), _ranked("b", 0), _ranked("c", None)
        assert sort_routes([a, b, c]) == (a, b, c)

    def test_does_not_persist_default(self) -> None:
        (route,) = sort_routes([_ranked("a", None)])
        assert route.priority is None

    def test_returns_tuple(self) -> None:
        assert isinstance(sort_routes([]), tuple)


class TestCompileRoute:
    def test_method_table(self) -> None:
        def get(ctx: object) -> None: ...

        route = compile_route(SimpleNamespace(GET=get), "/users")
        assert dict(route.methods) == {"GET": get}
        assert route.fallback is None

    def test_lowercase_method_names_ignored(self) -> None:
        def get(ctx: object) -> None: ...

        route = compile_route(SimpleNamespace(get=get), "/users")
        assert route.handler_for("GET") is None

    def test_callable_target(self) -> None:
        def handler(ctx: object) -> None: ...

        route = compile_route(handler, "/fn")
        assert route.fallback is handler
        assert route.fallback_kind is HandlerKind.CALLABLE_DIRECT

    def test_callable_target_beats_default(self) -> None:
        class Endpoint:
            def __call__(self, ctx: object) -> None: ...

            def default(self, ctx: object) -> None: ...

        endpoint = Endpoint()
        route = compile_route(endpoint, "/x")
        assert route.fallback is endpoint

    def test_default_export(self) -> None:
        def default(ctx: object) -> None: ...

        route = compile_route(SimpleNamespace(default=default), "/x")
        assert route.fallback is default
        assert route.fallback_kind is HandlerKind.CALLABLE_DEFAULT

    def test_non_callable_default_ignored(self) -> None:
        route = compile_route(SimpleNamespace(default="text"), "/x")
        assert route.fallback is None

    def test_extra_methods(self) -> None:
        def propfind(ctx: object) -> None: ...

        route = compile_route(SimpleNamespace(PROPFIND=propfind), "/dav", methods={"PROPFIND"})
        assert route.handler_for("PROPFIND") is propfind

    def test_methods_read_only(self) -> None:
        route = compile_route(SimpleNamespace(), "/x")
        with pytest.raises(TypeError):
            route.methods["GET"] = print  # type: ignore[index]

    def test_index_defaults_priority(self) -> None:
        assert compile_route(SimpleNamespace(), "/widgets/index").priority == -1

    def test_index_keeps_explicit_priority(self) -> None:
        assert compile_route(SimpleNamespace(priority=0), "/widgets/index").priority == 0
        assert compile_route(SimpleNamespace(priority=4), "/widgets/index").priority == 4

    def test_non_index_priority_left_unset(self) -> None:
        assert compile_route(SimpleNamespace(), "/widgets").priority is None

    def test_pattern_attached(self) -> None:
        route = compile_route(SimpleNamespace(), "/users/:id")
        assert route.param_names == ("id",)
        assert route.is_index is False

    @pytest.mark.parametrize("bad", ["5", 1.5, True])
    def test_bad_priority(self, bad: object) -> None:
        with pytest.raises(ConfigurationError, match="priority"):
            compile_route(SimpleNamespace(priority=bad), "/x")

    def test_bad_middleware(self) -> None:
        with pytest.raises(ConfigurationError, match="middleware"):
            compile_route(SimpleNamespace(middleware="nope"), "/x")

    def test_bad_method_handler(self) -> None:
        with pytest.raises(ConfigurationError, match="'GET'"):
            compile_route(SimpleNamespace(GET="nope"), "/x")

    def test_bad_path(self) -> None:
        with pytest.raises(ConfigurationError, match="path"):
            compile_route(SimpleNamespace(), 42)  # type: ignore[arg-type]


class TestBuildRoutes:
    def test_derives_paths(self, route_tree: RouteTree) -> None:
        root = route_tree({"users.py": GET_OK, "api/items.py": GET_OK})
        paths = {r.path for r in build_routes(root)}
        assert paths == {"/users", "/api/items"}

    def test_explicit_path_wins(self, route_tree: RouteTree) -> None:
        root = route_tree({"deep/nested/file.py": "path = '/short'\n" + GET_OK})
        (route,) = build_routes(root)
        assert route.path == "/short"
        assert route.pattern.match("/short") is not None

    def test_empty_path_derived(self, route_tree: RouteTree) -> None:
        root = route_tree({"users.py": "path = ''\n" + GET_OK})
        (route,) = build_routes(root)
        assert route.path == "/users"

    def test_imported_path_module_ignored(self, route_tree: RouteTree) -> None:
        root = route_tree({"files.py": "from os import path\n\n" + GET_OK})
        (route,) = build_routes(root)
        assert route.path == "/files"

    def test_source_recorded(self, route_tree: RouteTree) -> None:
        root = route_tree({"users.py": GET_OK})
        (route,) = build_routes(root)
        assert route.source == (root / "users.py").resolve()

    def test_index_after_named(self, route_tree: RouteTree) -> None:
        root = route_tree({"a/index.py": GET_OK, "b.py": GET_OK, "a/c.py": GET_OK})
        assert [r.path for r in build_routes(root)] == ["/b", "/a/c", "/a/index"]

    def test_priority_order(self, route_tree: RouteTree) -> None:
        root = route_tree({
            "a.py": "priority = 1\n" + GET_OK,
            "b.py": "priority = 1\n" + GET_OK,
            "c.py": "priority = 2\n" + GET_OK,
        })
        assert [r.path for r in build_routes(root)] == ["/c", "/a", "/b"]

    def test_custom_ext(self, route_tree: RouteTree) -> None:
        root = route_tree({"a.py": GET_OK, "b.pyw": GET_OK})
        routes = build_routes(root, ResolverConfig(ext=(".pyw",)))
        assert [r.path for r in routes] == ["/b"]

    def test_filter(self, route_tree: RouteTree) -> None:
        root = route_tree({"keep.py": GET_OK, "_skip.py": GET_OK})
        config = ResolverConfig(filter=lambda file: not file.name.startswith("_"))
        assert [r.path for r in build_routes(root, config)] == ["/keep"]

    def test_filtered_files_not_loaded(self, route_tree: RouteTree) -> None:
        root = route_tree({"ok.py": GET_OK, "broken.py": "raise RuntimeError\n"})
        config = ResolverConfig(filter=lambda file: file.stem != "broken")
        assert [r.path for r in build_routes(root, config)] == ["/ok"]

    def test_custom_loader(self, route_tree: RouteTree) -> None:
        root = route_tree({"users.py": "", "teams.py": ""})
        loaded: list[Path] = []

        def loader(file: Path) -> object:
            loaded.append(file)
            return SimpleNamespace(GET=lambda ctx: file.stem)

        routes = build_routes(root, ResolverConfig(loader=loader))
        assert [f.name for f in loaded] == ["teams.py", "users.py"]
        assert {r.path for r in routes} == {"/teams", "/users"}

    def test_load_failure_aborts(self, route_tree: RouteTree) -> None:
        root = route_tree({"ok.py": GET_OK, "zz_broken.py": "raise RuntimeError('bad route')\n"})
        with pytest.raises(RouteLoadError, match="bad route"):
            build_routes(root)

    def test_loader_exception_propagates(self, route_tree: RouteTree) -> None:
        root = route_tree({"a.py": ""})

        def loader(file: Path) -> object:
            raise LookupError("custom loader failed")

        with pytest.raises(LookupError, match="custom loader failed"):
            build_routes(root, ResolverConfig(loader=loader))

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="not found"):
            build_routes(tmp_path / "nope")

    def test_not_a_directory(self, tmp_path: Path) -> None:
        file = tmp_path / "routes.py"
        file.write_text("")
        with pytest.raises(NotADirectoryError):
            build_routes(file)

    def test_logs_summary(self, route_tree: RouteTree, caplog: pytest.LogCaptureFixture) -> None:
        root = route_tree({"a.py": GET_OK, "b.py": GET_OK})
        with caplog.at_level("DEBUG", logger="roost.routing"):
            build_routes(root)
        assert "Compiled 2 routes" in caplog.text
        assert "Loaded route /a" in caplog.text
