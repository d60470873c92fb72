"""Render a template against a data record and print the render nodes.

Usage:
    python scripts/render_template.py --default invoice-default --data data.json
    python scripts/render_template.py --template template.json --data data.json --no-defaults
    python scripts/render_template.py --schema
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from doctemplate.catalog import get_default_template, list_default_templates
from doctemplate.core.config import get_settings
from doctemplate.core.engine import TemplateEngine
from doctemplate.core.logging_config import get_logger, setup_logging
from doctemplate.interfaces.schema import template_json_schema
from doctemplate.interfaces.template import TemplateLoadError, TemplateNotFoundError
from doctemplate.strategies.template_engine import load_template

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a document template to render nodes (JSON).")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--template", type=Path, help="Path to a template JSON document")
    source.add_argument(
        "--default",
        metavar="ID",
        help=f"Built-in template id ({', '.join(t.id for t in list_default_templates())})",
    )
    source.add_argument("--schema", action="store_true", help="Print the template JSON schema and exit")
    parser.add_argument("--data", type=Path, help="Path to a data record JSON document")
    parser.add_argument("--no-defaults", action="store_true", help="Do not merge field default values")
    parser.add_argument("--log-dir", type=Path, help="Write info.log and error.log to this directory")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line renderer."""
    args = build_parser().parse_args(argv)

    settings = get_settings()
    setup_logging(settings, log_dir=args.log_dir)

    if args.schema:
        print(json.dumps(template_json_schema(), indent=2))
        return 0

    try:
        if args.template is not None:
            template = load_template(args.template.read_text(encoding="utf-8"))
        else:
            template = get_default_template(args.default)

        data = {}
        if args.data is not None:
            data = json.loads(args.data.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, TemplateLoadError, TemplateNotFoundError) as e:
        logger.error(f"Could not load input: {e}")
        return 1

    if args.no_defaults:
        settings = settings.model_copy(update={"apply_defaults": False})

    try:
        result = TemplateEngine(settings).generate(template, data)
    except TypeError as e:
        logger.error(f"Invalid data record: {e}")
        return 1

    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
