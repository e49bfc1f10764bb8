"""Command-line entry point: render a scene file to screenshots/<name>.ppm."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .errors import RaytracerError
from .parsing import check_args, help_text, load_scene
from .render import Renderer, output_name

_EXIT_FAILURE = 84


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the renderer; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        path = check_args(args)
    except RaytracerError as exc:
        print(exc, file=sys.stderr)
        return _EXIT_FAILURE
    if path is None:
        print(help_text())
        return 0
    try:
        scene = load_scene(path)
        print(scene.dump())
        Renderer().render(scene, output_name(path))
    except RaytracerError as exc:
        print(exc, file=sys.stderr)
        return _EXIT_FAILURE
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return _EXIT_FAILURE
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())