import logging
import os
from pathlib import Path
from typing import Iterator, Optional

from license_checker.errors import TraversalError
from license_checker.models import WalkOptions
from license_checker.rules.models import RuleSet
from license_checker.utils import join_relative, to_posix

logger = logging.getLogger(__name__)


def _list_sorted(directory: str) -> list[os.DirEntry]:
    try:
        with os.scandir(directory) as entries:
            return sorted(entries, key=lambda entry: entry.name)
    except OSError as exc:
        raise TraversalError(Path(exc.filename or directory), exc.strerror or str(exc)) from exc


class FileWalker:
    """Selects the files under a project root that a rule set includes.

    Entries are visited in name order and each directory is descended into at
    its sorted position. Directories are never selected themselves but are
    always descended into, so a later include rule can pick files out of an
    excluded directory. Only the metadata directory at the root is pruned.
    """

    def __init__(self, options: Optional[WalkOptions] = None) -> None:
        self.options = options or WalkOptions()

    def iter_candidates(self, root: Path) -> Iterator[str]:
        reserved = self._reserved_paths()
        yield from self._visit(str(root.resolve()), "", reserved)

    def _visit(self, directory: str, relative_dir: str, reserved: frozenset[str]) -> Iterator[str]:
        for entry in _list_sorted(directory):
            relative = join_relative(relative_dir, entry.name)
            if entry.is_dir(follow_symlinks=False):
                if relative == self.options.metadata_dirname:
                    continue
                yield from self._visit(entry.path, relative, reserved)
            elif entry.is_dir():
                # Symlinked directories are not followed.
                continue
            elif relative not in reserved:
                yield relative

    def _reserved_paths(self) -> frozenset[str]:
        # A worktree's .git is a file rather than a directory.
        config_path = to_posix(self.options.config_filename)
        return frozenset({config_path, self.options.metadata_dirname})

    def walk(self, root: Path, rules: RuleSet) -> list[str]:
        files = [path for path in self.iter_candidates(root) if rules.evaluate(path)]
        logger.debug("Selected %d file(s) under %s", len(files), root)
        return files
