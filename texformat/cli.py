#!/usr/bin/env python3
"""
Command-line interface for texformat.

Usage:
    texformat format paper.docx template.tex -o paper.tex --figure fig1.png
    texformat renumber paper.tex -o fixed.tex
    texformat serve --port 3000
    texformat config

Available commands:
    format      - Format a DOCX paper with a LaTeX template
    renumber    - Renumber \\bibitem and \\cite labels in a LaTeX file
    serve       - Start the API server
    config      - Show current configuration
"""

import argparse
import sys
from pathlib import Path

from texformat import __version__


def _write_output(text: str, output) -> None:
    if output is None:
        print(text)
    else:
        output.write_text(text, encoding="utf-8")
        print(f"Wrote {len(text)} characters to {output}", file=sys.stderr)


def cmd_format(args):
    """Format a DOCX paper with a LaTeX template."""
    from texformat.config import config
    from texformat.errors import TexformatError
    from texformat.service import format_paper

    for path in (args.paper, args.template):
        if not path.exists():
            print(f"Error: File not found: {path}", file=sys.stderr)
            return 1

    figure_names = [p.name for p in args.figure]

    try:
        result = format_paper(
            paper=args.paper.read_bytes(),
            template=args.template.read_bytes(),
            figure_names=figure_names,
            provider=args.provider,
            api_key=args.api_key,
            settings=config,
        )
    except TexformatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    _write_output(result.latex, args.output)

    if result.figures:
        print("\nFigure placeholders:", file=sys.stderr)
        for fig in result.figures:
            print(f"  {fig.placeholder} <- {fig.name}", file=sys.stderr)

    return 0


def cmd_renumber(args):
    """Renumber references in an existing LaTeX file."""
    from texformat.core.references import renumber

    if not args.tex_path.exists():
        print(f"Error: File not found: {args.tex_path}", file=sys.stderr)
        return 1

    text = args.tex_path.read_text(encoding="utf-8")
    _write_output(renumber(text), args.output)
    return 0


def cmd_serve(args):
    """Start the API server."""
    import uvicorn

    from texformat.config import config

    host = args.host or config.host
    port = args.port or config.port

    print("Starting texformat API server...")
    print(f"Config source: {config.config_source}")
    print(f"Default provider: {config.provider}")
    print(f"API endpoint: http://{host}:{port}/api/format")
    print()

    uvicorn.run(
        "texformat.servers.api:app",
        host=host,
        port=port,
        reload=args.reload,
        log_level="info",
    )
    return 0


def cmd_config(args):
    """Show current configuration."""
    from texformat.config import config

    print("texformat Configuration")
    print("=" * 50)
    print(f"Config source: {config.config_source}")
    print(f"Default provider: {config.provider}")
    print()

    print("[Groq]")
    print(f"  url: {config.groq_url}")
    print(f"  model: {config.groq_model}")
    print(f"  api_key: {'***' if config.groq_api_key else '(not set)'}")
    print()

    print("[Gemini]")
    print(f"  url: {config.gemini_url}")
    print(f"  model: {config.gemini_model}")
    print(f"  api_key: {'***' if config.gemini_api_key else '(not set)'}")
    print()

    print("[Generation]")
    print(f"  temperature: {config.temperature}")
    print(f"  max_tokens: {config.max_tokens}")
    print(f"  top_p: {config.top_p}")
    print(f"  top_k: {config.top_k}")
    print(f"  timeout: {config.timeout}")
    print()

    print("[Server]")
    print(f"  host: {config.host}")
    print(f"  port: {config.port}")

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="texformat",
        description="Format research papers into LaTeX templates with an LLM",
    )
    parser.add_argument("--version", action="version", version=f"texformat {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- format ---
    p_format = subparsers.add_parser("format", help="Format a DOCX paper with a LaTeX template")
    p_format.add_argument("paper", type=Path, help="Path to DOCX paper")
    p_format.add_argument("template", type=Path, help="Path to LaTeX template")
    p_format.add_argument(
        "--figure", type=Path, action="append", default=[], help="Figure file (repeatable)"
    )
    p_format.add_argument(
        "-p", "--provider", choices=["groq", "gemini"], default=None, help="Generation provider"
    )
    p_format.add_argument("--api-key", default=None, help="Provider API key")
    p_format.add_argument("-o", "--output", type=Path, default=None, help="Output .tex file")
    p_format.set_defaults(func=cmd_format)

    # --- renumber ---
    p_renumber = subparsers.add_parser("renumber", help="Renumber references in a LaTeX file")
    p_renumber.add_argument("tex_path", type=Path, help="Path to LaTeX file")
    p_renumber.add_argument("-o", "--output", type=Path, default=None, help="Output .tex file")
    p_renumber.set_defaults(func=cmd_renumber)

    # --- serve ---
    p_serve = subparsers.add_parser("serve", help="Start the API server")
    p_serve.add_argument("--host", default=None, help="Host to bind to")
    p_serve.add_argument("--port", type=int, default=None, help="Port to bind to")
    p_serve.add_argument("--reload", action="store_true", help="Enable auto-reload")
    p_serve.set_defaults(func=cmd_serve)

    # --- config ---
    p_config = subparsers.add_parser("config", help="Show current configuration")
    p_config.set_defaults(func=cmd_config)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
