import typer

from dep_hydrate.cli.hydrate import plan, run

app = typer.Typer(
    name="dep-hydrate",
    help="Install per-component dependencies across a multi-runtime project.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("run")(run)
app.command("list")(plan)


def main() -> None:
    app()
