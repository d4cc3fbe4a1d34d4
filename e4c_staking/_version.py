from pathlib import Path

try:
    import tomllib
except ImportError:
    import tomli as tomllib


def _get_version() -> str:
    pyproject_path = Path(__file__).parent.parent / "pyproject.toml"

    try:
        with open(pyproject_path, "rb") as f:
            pyproject_data = tomllib.load(f)
        return str(pyproject_data["project"]["version"])
    except (FileNotFoundError, KeyError):
        # Installed without the source tree next to it
        from importlib.metadata import PackageNotFoundError, version

        try:
            return version("e4c-staking-scripts")
        except PackageNotFoundError:
            return "0.0.0"


SDK_VERSION = _get_version()
