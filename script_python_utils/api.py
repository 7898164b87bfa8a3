"""Fonctions de module pour les scripts.

Raccourcis vers un ScriptContext par défaut, construit à la première
utilisation avec un ConsoleLogger :

    from script_python_utils.api import x, cp, mkdirp, read_json

    version = read_json("package.json")["version"]
    mkdirp(["dist", version])
    cp(["build", "app.js"], ["dist", version])
    x("git", ["tag", f"v{version}"])
"""

from typing import Any, List, Optional, Sequence, Union

from script_python_utils.commands.base import CommandResult
from script_python_utils.commands.options import OptionsLike
from script_python_utils.commands.runner import env
from script_python_utils.context import ScriptContext
from script_python_utils.filesystem.paths import PathSpec, home, join
from script_python_utils.logging.console_logger import ConsoleLogger

_default_context: Optional[ScriptContext] = None


def get_default_context() -> ScriptContext:
    """Retourne le contexte par défaut, créé au premier appel."""
    global _default_context
    if _default_context is None:
        _default_context = ScriptContext(logger=ConsoleLogger())
    return _default_context


def set_default_context(context: Optional[ScriptContext]) -> None:
    """Remplace le contexte par défaut (None pour le réinitialiser)."""
    global _default_context
    _default_context = context


def x(
    cmd: str,
    args: Union[Sequence[str], OptionsLike, None] = None,
    options: Optional[OptionsLike] = None,
) -> CommandResult:
    """Lance une ligne shell, ou un exécutable si args est fourni."""
    return get_default_context().x(cmd, args, options)


def run_exec(
    program: str,
    args: Sequence[str] = (),
    options: Optional[OptionsLike] = None,
) -> CommandResult:
    return get_default_context().run_exec(program, args, options)


def run_shell(
    line: str, options: Optional[OptionsLike] = None
) -> CommandResult:
    return get_default_context().run_shell(line, options)


def read_json(filepath: PathSpec) -> Any:
    return get_default_context().read_json(filepath)


def write_json(
    filepath: PathSpec,
    data: Any,
    indent: Optional[int] = None,
    sort_keys: bool = False,
) -> None:
    get_default_context().write_json(filepath, data, indent, sort_keys)


def mkdirp(*filepaths: PathSpec) -> None:
    get_default_context().mkdirp(*filepaths)


def globby(
    patterns: Union[str, Sequence[str]],
    cwd: Optional[PathSpec] = None,
    dot: bool = False,
    only_files: bool = True,
) -> List[str]:
    return get_default_context().globby(patterns, cwd, dot, only_files)


def write(
    filepath: PathSpec, data: Union[str, bytes], encoding: str = "utf-8"
) -> None:
    get_default_context().write(filepath, data, encoding)


def read(
    filepath: PathSpec, encoding: Optional[str] = None
) -> Union[str, bytes]:
    return get_default_context().read(filepath, encoding)


def cd(filepath: PathSpec) -> str:
    """Change le répertoire de base du contexte par défaut."""
    return get_default_context().cd(filepath)


def ls(filepath: PathSpec = ".") -> List[str]:
    return get_default_context().ls(filepath)


def cp(source: PathSpec, destination: PathSpec) -> str:
    return get_default_context().cp(source, destination)


def rm(*filepaths: PathSpec) -> None:
    get_default_context().rm(*filepaths)


def mv(source: PathSpec, destination: PathSpec) -> str:
    return get_default_context().mv(source, destination)


def exists(filepath: PathSpec) -> bool:
    return get_default_context().exists(filepath)


def cwd() -> str:
    return get_default_context().cwd()


def chmod(filepath: PathSpec, mode: int) -> None:
    get_default_context().chmod(filepath, mode)


def tmp_dir(prefix: str = "tmp-") -> str:
    return get_default_context().tmp_dir(prefix)


def empty_dir(filepath: PathSpec) -> None:
    get_default_context().empty_dir(filepath)


__all__ = [
    "env",
    "home",
    "join",
    "get_default_context",
    "set_default_context",
    "x",
    "run_exec",
    "run_shell",
    "read_json",
    "write_json",
    "mkdirp",
    "globby",
    "write",
    "read",
    "cd",
    "ls",
    "cp",
    "rm",
    "mv",
    "exists",
    "cwd",
    "chmod",
    "tmp_dir",
    "empty_dir",
]
