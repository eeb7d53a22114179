"""Build and cache local Lambda bundles for CDK asset staging.

The bundle layout is what the functions expect at ``/var/task``:
dependencies and the ``hello_world`` package at the root, entrypoints
under ``lambda/<function>/handler.py``.
"""

from __future__ import annotations

import argparse
import hashlib
import logging
import os
from pathlib import Path
import shutil
import subprocess
import sys

logger = logging.getLogger(__name__)

TARGET_PLATFORM = "manylinux_2_17_x86_64"
TARGET_IMPLEMENTATION = "cp"
TARGET_PYTHON_VERSION = "3.12"
CACHE_FORMAT_VERSION = "1"


def _run_pip(command: list[str], cwd: Path, env: dict[str, str]) -> None:
    subprocess.run(command, check=True, cwd=cwd, env=env)


def _copy_tree(source: Path, destination: Path) -> None:
    if not source.exists():
        raise FileNotFoundError(f"Missing source path: {source}")
    shutil.copytree(source, destination, dirs_exist_ok=True)


def _remove_tree(path: Path) -> None:
    if path.exists():
        shutil.rmtree(path)


def _cleanup_bundle(output_dir: Path) -> None:
    for cache_dir in list(output_dir.rglob("__pycache__")):
        shutil.rmtree(cache_dir)
    for pattern in ("*.pyc", "*.pyo"):
        for cache_file in output_dir.rglob(pattern):
            cache_file.unlink()


def dependency_cache_key(requirements: Path) -> str:
    """Hash the requirements together with the target platform."""
    hasher = hashlib.sha256()
    hasher.update(requirements.read_bytes())
    for part in (
        CACHE_FORMAT_VERSION,
        TARGET_PLATFORM,
        TARGET_IMPLEMENTATION,
        TARGET_PYTHON_VERSION,
    ):
        hasher.update(part.encode("utf-8"))
    return hasher.hexdigest()


def _pip_env(build_root: Path) -> dict[str, str]:
    pip_cache_dir = build_root / "pip-cache"
    pip_cache_dir.mkdir(parents=True, exist_ok=True)

    env = os.environ.copy()
    env.update(
        {
            "PIP_CACHE_DIR": str(pip_cache_dir),
            "PYTHONDONTWRITEBYTECODE": "1",
        }
    )
    return env


def _install_dependencies(
    source_root: Path,
    requirements: Path,
    cache_dir: Path,
    env: dict[str, str],
) -> None:
    temp_cache_dir = cache_dir.parent / f".{cache_dir.name}.tmp"
    _remove_tree(temp_cache_dir)
    temp_cache_dir.mkdir(parents=True, exist_ok=True)

    logger.info("Installing Lambda Python dependencies into cache...")
    _run_pip(
        [
            sys.executable,
            "-m",
            "pip",
            "install",
            "-r",
            str(requirements),
            "-t",
            str(temp_cache_dir),
            "--no-compile",
            "--platform",
            TARGET_PLATFORM,
            "--only-binary=:all:",
            "--implementation",
            TARGET_IMPLEMENTATION,
            "--python-version",
            TARGET_PYTHON_VERSION,
        ],
        cwd=source_root,
        env=env,
    )
    _cleanup_bundle(temp_cache_dir)
    _remove_tree(cache_dir)
    temp_cache_dir.rename(cache_dir)


def ensure_dependency_cache(source_root: Path, requirements: Path) -> Path:
    """Return a cache directory holding the installed requirements.

    The cache is keyed by ``dependency_cache_key`` and marked ready with
    a ``.ready`` file; an existing ready cache is reused without pip.
    """
    if not requirements.is_file():
        raise FileNotFoundError(f"Missing requirements file: {requirements}")

    build_root = source_root / ".lambda-build"
    key = dependency_cache_key(requirements)
    cache_dir = build_root / "deps-cache" / key
    marker_file = cache_dir / ".ready"

    if marker_file.is_file():
        logger.info("Reusing cached Lambda dependencies: %s", key[:12])
        return cache_dir

    logger.info("No dependency cache found for requirements hash %s", key[:12])
    cache_dir.parent.mkdir(parents=True, exist_ok=True)
    _install_dependencies(source_root, requirements, cache_dir, _pip_env(build_root))
    marker_file.write_text(f"{key}\n", encoding="utf-8")
    logger.info("Lambda dependency cache ready: %s", key[:12])
    return cache_dir


def build_bundle(source_root: Path, output_dir: Path) -> None:
    """Stage dependencies, package sources and entrypoints in ``output_dir``."""
    dependency_cache = ensure_dependency_cache(
        source_root,
        source_root / "requirements.txt",
    )

    _remove_tree(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    _copy_tree(dependency_cache, output_dir)
    (output_dir / ".ready").unlink(missing_ok=True)
    _copy_tree(source_root / "src", output_dir)
    _copy_tree(source_root / "lambda", output_dir / "lambda")
    _cleanup_bundle(output_dir)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--source-root",
        default=str(Path(__file__).resolve().parents[1]),
        help="Path to backend source root.",
    )
    parser.add_argument(
        "--output-dir",
        default="",
        help="Output directory for the bundled assets.",
    )
    parser.add_argument(
        "--deps-only",
        action="store_true",
        help="Warm dependency cache without building bundle output.",
    )
    return parser.parse_args()


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    args = _parse_args()
    source_root = Path(args.source_root).resolve()
    output_dir = (
        Path(args.output_dir).resolve()
        if args.output_dir
        else source_root / ".lambda-build" / "base"
    )

    if args.deps_only:
        ensure_dependency_cache(source_root, source_root / "requirements.txt")
        logger.info("Lambda dependency cache is ready.")
        return

    logger.info("Building Lambda bundle in %s", output_dir)
    build_bundle(source_root, output_dir)
    logger.info("Lambda bundle ready.")


if __name__ == "__main__":
    main()
