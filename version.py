"""
automatically maintains the latest git tag + revision info in a python file

"""

from __future__ import annotations

import os
import re
import subprocess

MAJOR_MINOR_PATCH_MATCHER = re.compile(r"^\d+\.\d+\.\d+$")
VERSION_LINE_MATCHER = re.compile(r"""^__version__\s*=\s*['"]([^'"]+)['"]""", re.MULTILINE)


def _detached() -> bool:
    try:
        # Returns exit code 1 if detached
        result = subprocess.run(["git", "symbolic-ref", "-q", "HEAD"], capture_output=True)
        return result.returncode == 1
    except OSError:
        return False


def pep440ify(git_describe_version: str) -> str:
    if not git_describe_version or MAJOR_MINOR_PATCH_MATCHER.match(git_describe_version):
        return git_describe_version
    if _detached() or git_describe_version.count("-") != 2:
        # not a plain tag, add a local part so setuptools accepts it
        return f"0.0.0+{git_describe_version.replace('-', '.')}"
    version, _commits, sha = git_describe_version.split("-")
    return f"{version}+{sha}"


def _read_version_file(version_file: str) -> str | None:
    try:
        with open(version_file, encoding="utf-8") as fp:
            match = VERSION_LINE_MATCHER.search(fp.read())
    except OSError:
        return None
    return match.group(1) if match else None


def get_project_version(version_file: str) -> str:
    version_file = os.path.join(os.path.dirname(os.path.realpath(__file__)), version_file)
    file_ver = _read_version_file(version_file)

    try:
        proc = subprocess.run(["git", "describe", "--tags", "--always"], capture_output=True, check=False)
        if proc.returncode == 0 and proc.stdout:
            git_ver = pep440ify(proc.stdout.splitlines()[0].strip().decode("utf-8"))
            if git_ver and git_ver != file_ver:
                with open(version_file, "w", encoding="utf-8") as fp:
                    fp.write("__version__ = '%s'\n" % git_ver)
                return git_ver
    except OSError:
        pass

    if not file_ver:
        raise Exception("version not available from git or from file %r" % version_file)

    return file_ver


if __name__ == "__main__":
    import sys

    get_project_version(sys.argv[1])
