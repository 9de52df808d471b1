"""
File Scanner — Expands the configured query globs into a list of files.

Patterns are rooted at the project root and support:
  - "**" for recursive directory matching
  - brace alternatives, e.g. "pages/**/*.{vue,ts,js}" (nested braces too)

Only regular files are returned. Each file appears once, in pattern order,
sorted within each pattern so repeated runs scan files in the same order.
"""

import glob
import os
import re
from typing import Iterable, List

_BRACE_GROUP = re.compile(r"\{([^{}]*)\}")


def expand_braces(pattern: str) -> List[str]:
    """Expand "{a,b}" alternatives into separate patterns.

    The innermost group is expanded first, so nested groups work:
    "src/{a,{b,c}}.ts" -> ["src/a.ts", "src/b.ts", "src/c.ts"].
    Groups without a comma ("{x}") are left untouched.
    """
    for match in _BRACE_GROUP.finditer(pattern):
        if "," not in match.group(1):
            continue
        head, tail = pattern[:match.start()], pattern[match.end():]
        expanded = []
        for alternative in match.group(1).split(","):
            for item in expand_braces(head + alternative + tail):
                if item not in expanded:
                    expanded.append(item)
        return expanded
    return [pattern]


def find_files(project_root: str, query_globs: Iterable[str]) -> List[str]:
    """Resolve every pattern under project_root to a de-duplicated file list."""
    files = []
    seen = set()
    for query_glob in query_globs:
        for pattern in expand_braces(query_glob):
            full_pattern = os.path.join(project_root, pattern)
            for path in sorted(glob.glob(full_pattern, recursive=True)):
                if not os.path.isfile(path):
                    continue
                path = os.path.abspath(path)
                if path in seen:
                    continue
                seen.add(path)
                files.append(path)
    return files


def glob_patterns(project_root: str, query_globs: Iterable[str]) -> List[str]:
    """The absolute patterns that will be scanned (for console output)."""
    return [os.path.join(project_root, g) for g in query_globs]
