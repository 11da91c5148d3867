#!/usr/bin/env python3
"""
CLI runner for Markdown and PDF conversions.

Provides command-line access to the same entry points as the API.
"""
import argparse
import asyncio
import base64
import logging
import os
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from config.settings import settings
from serving.logic import convert_markdown_to_docx, convert_markdown_to_pdf, optimize_pdf
from utils.text_utils import format_bytes, output_filename


def _write_artifact(data: str, output_path: str) -> int:
    """Decode base64 data to a file and return its size."""
    content = base64.b64decode(data)
    with open(output_path, 'wb') as f:
        f.write(content)
    return len(content)


def convert_markdown_cli(file_path: str, target: str, output: str = None) -> bool:
    """Convert a markdown file to PDF or DOCX."""
    print("=" * 60)
    print(f"Converting: {file_path} -> {target.upper()}")
    print("=" * 60)

    if not os.path.exists(file_path):
        print(f"❌ Error: File not found: {file_path}")
        return False

    with open(file_path, 'r', encoding='utf-8') as f:
        markdown = f.read()

    if target == 'pdf':
        result = convert_markdown_to_pdf(markdown)
    else:
        result = convert_markdown_to_docx(markdown)

    if not result.ok:
        print(f"❌ Error: {result.error}")
        return False

    output_path = output or output_filename(file_path, f".{target}")
    size = _write_artifact(result.data, output_path)
    print(f"✓ Written: {output_path} ({format_bytes(size)})")
    return True


async def optimize_pdf_cli(file_path: str, output: str = None) -> bool:
    """Optimize a PDF file."""
    print("=" * 60)
    print(f"Optimizing: {file_path}")
    print("=" * 60)

    if not os.path.exists(file_path):
        print(f"❌ Error: File not found: {file_path}")
        return False

    with open(file_path, 'rb') as f:
        payload = base64.b64encode(f.read()).decode()

    result = await optimize_pdf(payload)

    print(f"Original size: {format_bytes(result.original_size)}")
    if result.size is not None:
        print(f"Optimized size: {format_bytes(result.size)} ({result.reduction_percent}% reduction)")

    if not result.ok:
        print(f"❌ {result.error}")
        return False

    output_path = output or output_filename(file_path, ".pdf")
    _write_artifact(result.data, output_path)
    print(f"✓ Written: {output_path}")
    return True


def main():
    parser = argparse.ArgumentParser(
        description='Markdown to PDF/DOCX conversion and PDF optimization'
    )
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    pdf_parser = subparsers.add_parser('md2pdf', help='Convert markdown to PDF')
    pdf_parser.add_argument('file', type=str, help='Markdown file')
    pdf_parser.add_argument('-o', '--output', type=str, help='Output file path')

    docx_parser = subparsers.add_parser('md2docx', help='Convert markdown to DOCX')
    docx_parser.add_argument('file', type=str, help='Markdown file')
    docx_parser.add_argument('-o', '--output', type=str, help='Output file path')

    optimize_parser = subparsers.add_parser('optimize', help='Reduce PDF size')
    optimize_parser.add_argument('file', type=str, help='PDF file')
    optimize_parser.add_argument('-o', '--output', type=str, help='Output file path')

    args = parser.parse_args()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s"
    )

    if args.command == 'md2pdf':
        ok = convert_markdown_cli(args.file, 'pdf', args.output)
    elif args.command == 'md2docx':
        ok = convert_markdown_cli(args.file, 'docx', args.output)
    elif args.command == 'optimize':
        ok = asyncio.run(optimize_pdf_cli(args.file, args.output))
    else:
        parser.print_help()
        return

    sys.exit(0 if ok else 1)


if __name__ == '__main__':
    main()
