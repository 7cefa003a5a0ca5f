"""Tests for PackageGraph queries over hand-wired node trees."""

import pytest

from pubgraph.graph import PackageGraph
from pubgraph.models import DependencyType, PackageNode


def node(name, dependency_type=DependencyType.PUB):
    return PackageNode(name, "1.0.0", dependency_type, f"/pkgs/{name}")


def names(packages):
    return [package.name for package in packages]


class TestFromRoot:
    """Test PackageGraph.from_root indexing."""

    def test_indexes_every_reachable_node(self):
        root, a, b, c = node("root", DependencyType.PATH), node("a"), node("b"), node("c")
        root.dependencies.extend([a, b])
        b.dependencies.extend([a, c])

        graph = PackageGraph.from_root(root)

        assert set(graph.all_packages) == {"root", "a", "b", "c"}
        assert graph.all_packages["root"] is graph.root
        for name, package in graph.all_packages.items():
            assert package.name == name

    def test_all_packages_is_read_only(self):
        graph = PackageGraph.from_root(node("root"))

        with pytest.raises(TypeError):
            graph.all_packages["other"] = node("other")

    def test_cycle_back_to_root(self):
        root, a = node("root"), node("a")
        root.dependencies.append(a)
        a.dependencies.append(root)

        graph = PackageGraph.from_root(root)

        assert len(graph) == 2


class TestLookup:
    """Test lookup and containment."""

    def test_lookup_present_and_absent(self):
        root, a = node("root"), node("a")
        root.dependencies.append(a)
        graph = PackageGraph.from_root(root)

        assert graph.lookup("a") is a
        assert graph["a"] is a
        assert graph.lookup("missing") is None
        assert "a" in graph
        assert "missing" not in graph


class TestOrderedPackages:
    """Test postorder ordering by dependencies."""

    def test_single_node(self):
        graph = PackageGraph.from_root(node("root"))

        assert names(graph.ordered_packages) == ["root"]

    def test_dependencies_precede_dependents(self):
        """Root depends on A and B, B depends on A."""
        root, a, b = node("root", DependencyType.PATH), node("a"), node("b", DependencyType.PATH)
        root.dependencies.extend([a, b])
        b.dependencies.append(a)

        graph = PackageGraph.from_root(root)

        assert names(graph.ordered_packages) == ["a", "b", "root"]

    def test_edge_order_drives_traversal(self):
        """B is listed first, so A is reached through B."""
        root, a, b = node("root"), node("a"), node("b")
        root.dependencies.extend([b, a])
        b.dependencies.append(a)

        assert names(PackageGraph.from_root(root).ordered_packages) == ["a", "b", "root"]

    def test_cycle_with_root(self):
        root, a = node("root"), node("a")
        root.dependencies.append(a)
        a.dependencies.append(root)

        ordered = PackageGraph.from_root(root).ordered_packages

        assert names(ordered) == ["a", "root"]

    def test_cycle_between_dependencies(self):
        root, a, b, c = node("root"), node("a"), node("b"), node("c")
        root.dependencies.append(a)
        a.dependencies.append(b)
        b.dependencies.extend([a, c])

        ordered = names(PackageGraph.from_root(root).ordered_packages)

        assert len(ordered) == 4
        assert ordered[-1] == "root"
        assert ordered.index("c") < ordered.index("b")

    def test_self_loop(self):
        root, a = node("root"), node("a")
        root.dependencies.append(a)
        a.dependencies.append(a)

        assert names(PackageGraph.from_root(root).ordered_packages) == ["a", "root"]

    def test_every_acyclic_edge_is_respected(self):
        root = node("root")
        packages = [node(f"p{i}") for i in range(6)]
        root.dependencies.extend(reversed(packages))
        for i, package in enumerate(packages):
            package.dependencies.extend(packages[:i])

        ordered = PackageGraph.from_root(root).ordered_packages
        position = {package.name: i for i, package in enumerate(ordered)}

        assert ordered[-1] is root
        for package in packages + [root]:
            for dep in package.dependencies:
                assert position[dep.name] < position[package.name]

    def test_deep_chain_does_not_hit_recursion_limit(self):
        root = node("root")
        current = root
        for i in range(5000):
            nxt = node(f"p{i}")
            current.dependencies.append(nxt)
            current = nxt

        graph = PackageGraph.from_root(root)
        ordered = graph.ordered_packages

        assert len(ordered) == 5001
        assert ordered[0].name == "p4999"
        assert ordered[-1] is root


class TestDependentsOf:
    """Test reverse dependency lookups."""

    def _graph(self):
        root, a, b, c = node("root"), node("a"), node("b"), node("c")
        root.dependencies.extend([a, b, c])
        b.dependencies.append(a)
        c.dependencies.append(a)
        return PackageGraph.from_root(root)

    def test_direct_dependents_in_order(self):
        graph = self._graph()

        assert names(graph.dependents_of("a")) == ["b", "c", "root"]

    def test_only_direct_dependents(self):
        root, a, b = node("root"), node("a"), node("b")
        root.dependencies.append(b)
        b.dependencies.append(a)
        graph = PackageGraph.from_root(root)

        assert names(graph.dependents_of("a")) == ["b"]

    def test_unknown_package_has_no_dependents(self):
        assert self._graph().dependents_of("missing") == []

    def test_root_has_no_dependents(self):
        assert self._graph().dependents_of("root") == []

    def test_self_loop_excluded(self):
        root, a = node("root"), node("a")
        root.dependencies.append(a)
        a.dependencies.append(a)
        graph = PackageGraph.from_root(root)

        assert names(graph.dependents_of("a")) == ["root"]


class TestRendering:
    """Test the diagnostic text rendering."""

    def test_node_rendering(self):
        a, b = node("a", DependencyType.GITHUB), node("b")
        a.dependencies.append(b)

        assert str(a) == (
            "  a:\n"
            "    version: 1.0.0\n"
            "    type: github\n"
            "    path: /pkgs/a\n"
            "    dependencies: [b]"
        )

    def test_graph_rendering_lists_every_node(self):
        root, a = node("root", DependencyType.PATH), node("a")
        root.dependencies.append(a)

        rendered = str(PackageGraph.from_root(root))

        assert rendered == f"{root}\n{a}\n"
        assert "dependencies: [a]" in rendered
        assert "dependencies: []" in rendered
