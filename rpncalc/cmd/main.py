import typer

from rpncalc.calculator import parse, to_postfix
from rpncalc.errors import CalcError
from rpncalc.evaluate import OutcomeStatus, evaluate_outcome
from rpncalc.helper import error_message, format_value
from rpncalc.token import describe_token, format_tokens

app = typer.Typer()


@app.command(context_settings={"ignore_unknown_options": True})
def main(expression: str):
    """Show the tokens, the postfix form and the value of EXPRESSION."""
    try:
        tokens = parse(expression)
        typer.echo(f"tokens:  [{', '.join(describe_token(t) for t in tokens)}]")

        postfix = to_postfix(tokens)
        typer.echo(f"postfix: {format_tokens(postfix)}")

        outcome = evaluate_outcome(postfix)
    except CalcError as e:
        typer.echo(error_message(expression, e.location, e.message), err=True, nl=False)
        raise typer.Exit(1)

    if outcome.status == OutcomeStatus.Value:
        typer.echo(f"value:   {format_value(outcome.value)}")
    else:
        typer.echo(f"value:   no result ({outcome.status.name})")


if __name__ == "__main__":
    app()
