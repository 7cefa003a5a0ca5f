"""Shared fixtures for pubgraph tests."""

import pytest
import yaml


@pytest.fixture
def make_workspace(tmp_path):
    """
    Lay out packages on disk with a `.packages` index in the root package.

    Usage: make_workspace({"my_app": {...manifest...}, "a": {...}})
    The first package is the root. Returns the root directory.
    """

    def _make(manifests, index_lines=None):
        names = list(manifests)
        root_name = names[0]
        root_dir = tmp_path / root_name

        lines = ["# Generated by pub on 2017-01-01 00:00:00.000."]
        for name, manifest in manifests.items():
            package_dir = root_dir if name == root_name else tmp_path / "cache" / name
            package_dir.mkdir(parents=True, exist_ok=True)
            (package_dir / "pubspec.yaml").write_text(yaml.safe_dump(manifest, sort_keys=False))
            if name == root_name:
                lines.append(f"{name}:lib/")
            else:
                lines.append(f"{name}:{package_dir.as_uri()}/lib/")

        if index_lines is not None:
            lines = index_lines
        (root_dir / ".packages").write_text("\n".join(lines) + "\n")
        return root_dir

    return _make
