"""
Command-line interface for WritWay.
"""

import asyncio
import json
from pathlib import Path
from typing import Any, Optional

import click
import structlog

from writway.config import get_settings
from writway.errors import WritWayError
from writway.logging_config import configure_logging

logger = structlog.get_logger(__name__)


def _load_claim(path: str) -> dict[str, Any]:
    """Read a camelCase claim JSON file and validate it."""
    from writway.models.claim import ClaimFormData

    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return ClaimFormData.model_validate(data).to_payload()
    except ValueError as e:
        raise click.ClickException(f"Invalid claim file {path}: {e}") from e


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """WritWay: Ontario Small Claims Court claim intake."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug

    settings = get_settings()
    if debug:
        settings = settings.model_copy(update={"log_level": "DEBUG"})
    configure_logging(settings)


# =========================================================================
# Server Commands
# =========================================================================


@cli.command()
@click.option("--host", default=None, help="Host to bind to")
@click.option("--port", default=None, type=int, help="Port to bind to")
@click.option("--reload", is_flag=True, help="Enable auto-reload")
def serve(host: Optional[str], port: Optional[int], reload: bool) -> None:
    """Start the API server."""
    import uvicorn

    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port

    click.echo(f"Starting WritWay API server on {host}:{port}")

    uvicorn.run(
        "writway.api.main:app",
        host=host,
        port=port,
        reload=reload,
    )


# =========================================================================
# Claim Commands
# =========================================================================


@cli.command()
@click.argument("description")
@click.option("--output", "-o", type=click.Path(), help="Write the result as JSON")
def analyze(description: str, output: Optional[str]) -> None:
    """Extract claim fields from a free-text DESCRIPTION."""
    from writway.services.claim_service import get_claim_service

    if len(description.strip()) < 10:
        raise click.ClickException("Description must be at least 10 characters")

    try:
        result = asyncio.run(get_claim_service().analyze_description(description))
    except WritWayError as e:
        raise click.ClickException(e.message) from e

    payload = result.model_dump(by_alias=True)

    click.echo("\n=== Extracted ===\n")
    for section, fields in payload["extracted"].items():
        click.echo(f"{section}:")
        for key, value in fields.items():
            click.echo(f"  {key}: {value}")

    if payload["inferred"]:
        click.echo(f"\nInferred: {', '.join(payload['inferred'])}")
    click.echo(f"\nMissing: {len(payload['missing'])} field(s)")
    for item in payload["ambiguous"]:
        click.echo(f"  ? {item['field']}: {item['reason']}")

    if output:
        Path(output).write_text(json.dumps(payload, indent=2))
        click.echo(f"\nResults written to: {output}")


@cli.command("next-question")
@click.argument("claim_json", type=click.Path(exists=True))
@click.option("--answered", "-a", multiple=True, help="Field path already answered")
def next_question(claim_json: str, answered: tuple[str, ...]) -> None:
    """Show the next question for the claim in CLAIM_JSON."""
    from writway.services.claim_service import get_claim_service

    claim = _load_claim(claim_json)
    result = get_claim_service().get_next_question(claim, answered)

    if result.completed or result.question is None:
        click.echo("All required questions answered.")
        return

    question = result.question
    click.echo(f"[{question.field}] {question.label}")
    if question.description:
        click.echo(f"  {question.description}")
    for option in question.options or []:
        click.echo(f"  - {option.label} ({option.value})")


def _write_documents(documents, output_dir: str) -> None:
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    pdf_path = out / documents.pdf_filename
    word_path = out / documents.word_filename
    pdf_path.write_bytes(documents.pdf)
    word_path.write_bytes(documents.word)

    click.echo(f"PDF written to: {pdf_path}")
    click.echo(f"Word written to: {word_path}")


@cli.command()
@click.argument("claim_json", type=click.Path(exists=True))
@click.option("--description", "-d", default=None, help="Initial claim description")
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False),
    default=".",
    help="Directory for the generated files",
)
def generate(claim_json: str, description: Optional[str], output_dir: str) -> None:
    """Render the claim in CLAIM_JSON as PDF and Word files."""
    from writway.services.document_service import get_document_service

    claim = _load_claim(claim_json)

    try:
        documents = asyncio.run(
            get_document_service().generate_documents(claim, description)
        )
    except WritWayError as e:
        raise click.ClickException(e.message) from e

    _write_documents(documents, output_dir)


@cli.command()
@click.argument("claim_json", type=click.Path(exists=True))
@click.option("--description", "-d", default=None, help="Initial claim description")
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Also render the draft as PDF and Word into this directory",
)
def draft(claim_json: str, description: Optional[str], output_dir: Optional[str]) -> None:
    """Draft Form 7A and Schedule "A" text for the claim in CLAIM_JSON."""
    from writway.services.document_service import get_document_service

    claim = _load_claim(claim_json)
    service = get_document_service()

    try:
        drafted = asyncio.run(service.draft_documents(claim, description))
        documents = asyncio.run(service.render_draft(drafted)) if output_dir else None
    except WritWayError as e:
        raise click.ClickException(e.message) from e

    click.echo(f"Claim type: {drafted.claim_type}")
    if drafted.legal_bases:
        click.echo(f"Legal basis: {drafted.legal_bases}")
    click.echo("\n=== Form 7A ===\n")
    click.echo(drafted.form7a_text)
    click.echo("\n=== Schedule A ===\n")
    click.echo(drafted.schedule_a_text)
    if drafted.warnings:
        click.echo("\n=== Warnings ===\n")
        click.echo(drafted.warnings)
    if documents is not None:
        click.echo("")
        _write_documents(documents, output_dir)


@cli.command()
@click.argument("claim_json", type=click.Path(exists=True))
@click.option("--description", "-d", default=None, help="Initial claim description")
def preview(claim_json: str, description: Optional[str]) -> None:
    """Print the document content for CLAIM_JSON as plain text."""
    from writway.claims.content_plan import build_content_plan, plan_to_text

    claim = _load_claim(claim_json)
    click.echo(plan_to_text(build_content_plan(claim, description)))


# =========================================================================
# Utility Commands
# =========================================================================


@cli.command()
def health() -> None:
    """Check service configuration."""
    from writway.services.llm_service import get_llm_service

    settings = get_settings()

    click.echo("\n=== Service Health Check ===\n")
    click.echo(f"Environment: {settings.environment}")
    click.echo(f"Model: {settings.openai_model}")
    for provider, ok in get_llm_service().health_check().items():
        status_str = "configured" if ok else "not configured"
        click.echo(f"  {provider}: {status_str}")


def main() -> None:
    """Main entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
