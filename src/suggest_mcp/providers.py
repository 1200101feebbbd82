"""Candidate providers: where the names to suggest come from.

Each provider answers three questions for one lookup context: does the
requested name exist, which names could have been meant, and what is the call
signature of a candidate. Providers raise CandidateLookupError when their
source of names is unavailable, whatever the underlying failure; they never
rank anything themselves.
"""

import importlib
import importlib.util
import inspect
import logging
import os
import pkgutil
import sys
from pathlib import Path
from types import ModuleType
from typing import Any

from .candidates import is_dotted_module_candidate, is_module_candidate
from .consts import MODULE_FILE_EXTENSIONS, PACKAGE_INIT_FILES
from .exceptions import CandidateLookupError

logger = logging.getLogger("suggest-mcp.providers")


def _import_failure(module_name: str, error: Exception, **context) -> CandidateLookupError:
    # importing runs module code, so any exception type can show up here
    return CandidateLookupError(
        f"Cannot import module '{module_name}'",
        errors=[f"{type(error).__name__}: {error}"],
        suggestions=["Use suggest_module_names to check the module name"],
        context={"module": module_name, **context},
    )


def _has_attribute(obj: Any, name: str) -> bool:
    try:
        getattr(obj, name)
    except AttributeError:
        return False
    except Exception:
        # a property that fails on access still exists
        return True
    return True


def _attribute_signature(obj: Any, name: str) -> str | None:
    try:
        value = getattr(obj, name)
    except Exception:
        return None
    return _signature_of(value)


def resolve_object(dotted_path: str) -> Any:
    """Resolve a dotted path such as ``collections.OrderedDict`` to an object.

    The longest importable prefix is imported as a module and the remaining
    parts are looked up as attributes.

    Args:
        dotted_path: Dotted path to a module, or an object inside a module.

    Returns:
        The resolved object.

    Raises:
        CandidateLookupError: If no prefix is importable, importing a prefix
            fails, or an attribute along the path cannot be read.
    """
    parts = dotted_path.split(".")
    if not all(parts):
        raise CandidateLookupError(
            f"Invalid object path '{dotted_path}'",
            errors=[f"'{dotted_path}' is not a dotted Python path"],
            suggestions=["Use a dotted path such as 'os.path' or 'collections.Counter'"],
            context={"target": dotted_path},
        )

    obj = None
    consumed = 0
    for i in range(len(parts), 0, -1):
        module_name = ".".join(parts[:i])
        try:
            obj = importlib.import_module(module_name)
        except ImportError:
            continue
        except Exception as e:
            raise _import_failure(module_name, e, target=dotted_path) from e
        consumed = i
        break

    if consumed == 0:
        raise CandidateLookupError(
            f"Cannot import '{parts[0]}'",
            errors=[f"No importable module found in '{dotted_path}'"],
            suggestions=["Check that the module is installed in the server environment"],
            context={"target": dotted_path},
        )

    for attribute in parts[consumed:]:
        try:
            obj = getattr(obj, attribute)
        except Exception as e:
            raise CandidateLookupError(
                f"Cannot resolve '{dotted_path}'",
                errors=[f"{type(e).__name__}: {e}"],
                suggestions=["Use suggest_members on the parent object to find the right name"],
                context={"target": dotted_path, "missing": attribute},
            ) from e

    return obj


def _signature_of(value: Any) -> str | None:
    if not callable(value):
        return None
    try:
        return str(inspect.signature(value))
    except (TypeError, ValueError):
        # builtins without introspectable signatures
        return None


def strip_known_extension(file_name: str) -> str:
    """Remove a trailing module file extension, if any."""
    for extension in MODULE_FILE_EXTENSIONS:
        if file_name.endswith(extension):
            return file_name[: -len(extension)]
    return file_name


def module_specifier(containing_dir: Path, target: Path) -> str:
    """Relative specifier for ``target`` as seen from ``containing_dir``.

    Always starts with ``./`` or ``../`` and uses forward slashes.
    """
    relative = os.path.relpath(target, containing_dir).replace(os.sep, "/")
    if relative == ".":
        return "./"
    return relative if relative.startswith(".") else f"./{relative}"


class MemberProvider:
    """Members of a live Python object, as listed by ``dir()``."""

    def __init__(self, target: Any):
        self.target = target

    def has_name(self, name: str) -> bool:
        return _has_attribute(self.target, name)

    def get_candidates(self) -> list[str]:
        try:
            return dir(self.target)
        except Exception as e:
            raise CandidateLookupError(
                f"Cannot list members of {type(self.target).__name__}",
                errors=[f"{type(e).__name__}: {e}"],
                context={"target_type": type(self.target).__name__},
            ) from e

    def get_signature(self, name: str) -> str | None:
        return _attribute_signature(self.target, name)


class ExportProvider:
    """Names importable from a module: ``__all__`` or its attributes, plus submodules."""

    def __init__(self, module_name: str):
        self.module_name = module_name
        self._module: ModuleType | None = None

    def _load(self) -> ModuleType:
        if self._module is None:
            try:
                self._module = importlib.import_module(self.module_name)
            except Exception as e:
                raise _import_failure(self.module_name, e) from e
        return self._module

    def _submodules(self) -> list[str]:
        path = getattr(self._load(), "__path__", None)
        if path is None:
            return []
        return [info.name for info in pkgutil.iter_modules(path)]

    def has_name(self, name: str) -> bool:
        return _has_attribute(self._load(), name) or name in self._submodules()

    def get_candidates(self) -> list[str]:
        module = self._load()
        exported = getattr(module, "__all__", None)
        names = list(exported) if exported is not None else dir(module)
        names.extend(self._submodules())
        return list(dict.fromkeys(names))

    def get_signature(self, name: str) -> str | None:
        return _attribute_signature(self._load(), name)


class ModulePathProvider:
    """Module files next to a relative path requested from a containing file.

    The containing file itself is never a candidate.
    """

    def __init__(self, requested_path: str, containing_file: str | Path):
        self.requested_path = requested_path.replace("\\", "/")
        self.containing_file = Path(containing_file)
        self.containing_dir = self.containing_file.parent

    def has_name(self, name: str) -> bool:
        resolved = self.containing_dir / name.replace("\\", "/")
        if resolved.exists():
            return True
        base = Path(strip_known_extension(str(resolved)))
        if any(Path(f"{base}{ext}").is_file() for ext in MODULE_FILE_EXTENSIONS):
            return True
        return any((base / init).is_file() for init in PACKAGE_INIT_FILES)

    def get_candidates(self) -> list[str]:
        target_dir = (self.containing_dir / self.requested_path).parent
        try:
            entries = sorted(target_dir.iterdir())
        except OSError as e:
            raise CandidateLookupError(
                f"Cannot read directory '{target_dir}'",
                errors=[str(e)],
                context={"directory": str(target_dir)},
            ) from e

        own_file = self.containing_file.resolve()
        specifiers = []
        for entry in entries:
            if entry.resolve() == own_file:
                continue
            if entry.is_dir():
                candidate = entry
            elif entry.suffix in MODULE_FILE_EXTENSIONS:
                candidate = Path(strip_known_extension(str(entry)))
            else:
                continue
            specifiers.append(module_specifier(self.containing_dir, candidate))

        logger.debug(f"Found {len(specifiers)} module entries in {target_dir}")
        return [
            specifier
            for specifier in dict.fromkeys(specifiers)
            if is_module_candidate(specifier, self.requested_path)
        ]

    def get_signature(self, name: str) -> str | None:
        return None


class ModuleNameProvider:
    """Dotted module names: top-level modules, or submodules of the parent package."""

    def __init__(self, module_name: str):
        self.module_name = module_name

    def has_name(self, name: str) -> bool:
        try:
            return importlib.util.find_spec(name) is not None
        except (ImportError, ValueError):
            # parent missing, or parent is not a package
            return False
        except Exception as e:
            # find_spec imports the parent package first
            raise _import_failure(name.rpartition(".")[0], e) from e

    def get_candidates(self) -> list[str]:
        parent, _, _ = self.module_name.rpartition(".")
        if not parent:
            names = {info.name for info in pkgutil.iter_modules()}
            names.update(sys.builtin_module_names)
            names.update(sys.stdlib_module_names)
            return sorted(names)

        try:
            package = importlib.import_module(parent)
        except Exception as e:
            raise _import_failure(parent, e) from e

        path = getattr(package, "__path__", None)
        if path is None:
            return []
        submodules = (f"{parent}.{info.name}" for info in pkgutil.iter_modules(path))
        return sorted(
            name for name in submodules if is_dotted_module_candidate(name, self.module_name)
        )

    def get_signature(self, name: str) -> str | None:
        return None
