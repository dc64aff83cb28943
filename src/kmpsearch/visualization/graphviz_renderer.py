# src/kmpsearch/visualization/graphviz_renderer.py

import html
import logging
import shutil
import subprocess

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("svg",)


def render_dot(dot_source: str, fmt: str = "svg") -> str:
    """
    Renders DOT source with the system 'dot' command and returns the output text.
    Rendering problems come back as an inline error SVG.
    """
    if fmt not in SUPPORTED_FORMATS:
        raise ValueError(f"Unsupported output format: {fmt!r}")

    if not shutil.which("dot"):
        logger.warning("GraphViz 'dot' executable not found in PATH")
        return _create_error_svg("GraphViz 'dot' executable not found in PATH.")

    try:
        process = subprocess.run(
            ["dot", f"-T{fmt}"],
            input=dot_source,
            capture_output=True,
            text=True,
            check=True,
            encoding='utf-8'
        )
        return process.stdout
    except subprocess.CalledProcessError as e:
        logger.warning("dot failed: %s", e.stderr)
        return _create_error_svg(f"GraphViz Error: {e.stderr}")
    except OSError as e:
        logger.warning("dot could not be run: %s", e)
        return _create_error_svg(f"Rendering Error: {e}")


def _create_error_svg(msg: str) -> str:
    """Fallback SVG to show errors inline."""
    return f'''
    <svg width="400" height="100" xmlns="http://www.w3.org/2000/svg">
      <rect width="100%" height="100%" fill="#fee"/>
      <text x="50%" y="50%" dominant-baseline="middle" text-anchor="middle" fill="red" font-family="monospace">
        {html.escape(msg)}
      </text>
    </svg>
    '''
