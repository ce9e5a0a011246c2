import tomllib
from importlib import metadata as importlib_metadata
from pathlib import Path
from typing import NotRequired, Required, cast

from typing_extensions import ReadOnly, TypedDict

DISTRIBUTION_NAME = "pytoolkit-optional"
PYPROJECT_PATH = Path(__file__).parent.parent / "pyproject.toml"


class ProjectInfo(TypedDict):
    """[project]セクションの型定義"""

    name: ReadOnly[Required[str]]
    version: ReadOnly[NotRequired[str]]


class PyProjectToml(TypedDict, total=False):
    """pyproject.toml全体の型定義
    https://peps.python.org/pep-0621/
    """

    project: ReadOnly[Required[ProjectInfo]]


def _read_pyproject() -> PyProjectToml:
    if PYPROJECT_PATH.is_file():
        with PYPROJECT_PATH.open("rb") as f:
            data = cast(PyProjectToml, tomllib.load(f))
        if data.get("project", {}).get("name") == DISTRIBUTION_NAME:
            return data
    return {"project": {"name": DISTRIBUTION_NAME}}


def get_package_metadata() -> PyProjectToml:
    """Return the package metadata.

    The installed distribution wins; a source checkout falls back to its own
    pyproject.toml, ignoring files that describe another project.
    """
    try:
        dist = importlib_metadata.metadata(DISTRIBUTION_NAME)
    except importlib_metadata.PackageNotFoundError:
        return _read_pyproject()
    return {"project": {"name": dist["Name"], "version": dist["Version"]}}


METADATA = get_package_metadata()
NAME = METADATA["project"]["name"]
VERSION = METADATA["project"].get("version", "unknown")
