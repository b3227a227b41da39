"""Executable Textual playground for the masked amount field."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal, Vertical
    from textual.widgets import Footer, Header, Input, Label, Static, Switch
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use bigint_input.adapters.textual.app"
    ) from exc

from bigint_input.masking import configure_formatting
from bigint_input.runtime import telemetry

from .widget import BigIntInput

MAX_DECIMALS = 18
DEFAULT_VALUE = 123456789000000000000000000


def clamp_decimals(raw: str, fallback: int) -> int:
    try:
        decimals = int(raw)
    except ValueError:
        return fallback
    return min(max(decimals, 0), MAX_DECIMALS)


class BigIntInputApp(App[None]):
    """Amount field plus raw-integer and decimals controls."""

    CSS = """
    Screen {
        align: center middle;
    }

    #panel {
        width: 64;
        height: auto;
        border: round $accent;
        padding: 1 2;
    }

    #amount {
        margin-bottom: 1;
    }

    .readout {
        height: 3;
    }

    .readout Label {
        width: 10;
        padding: 1 1 0 0;
    }

    #status-line {
        height: 1;
        padding: 0 1;
        background: $boost;
    }
    """

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self, *, decimals: int = MAX_DECIMALS, value: int = DEFAULT_VALUE
    ) -> None:
        super().__init__()
        self._decimals = decimals
        self._value = value
        self._status: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="panel"):
            yield BigIntInput(self._decimals, self._value, id="amount")
            with Horizontal(classes="readout"):
                yield Label("bigint")
                yield Input(str(self._value), type="integer", id="raw-value")
            with Horizontal(classes="readout"):
                yield Label("decimals")
                yield Input(str(self._decimals), type="integer", id="decimals")
            with Horizontal(classes="readout"):
                yield Label("keep")
                yield Switch(value=False, id="keep-amount")
        self._status = Static("", id="status-line")
        yield self._status
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#amount", BigIntInput).focus()

    def on_big_int_input_value_changed(self, event: BigIntInput.ValueChanged) -> None:
        raw = self.query_one("#raw-value", Input)
        if raw.value != str(event.value):
            raw.value = str(event.value)
        self._update_status(f"{event.value}n <- {event.text!r}")

    def on_input_changed(self, event: Input.Changed) -> None:
        amount = self.query_one("#amount", BigIntInput)
        if event.input.id == "decimals":
            current = amount.adapter.controller.decimals
            # "keep" holds the shown amount, like switching between tokens.
            amount.set_decimals(
                clamp_decimals(event.value, current),
                keep_amount=self.query_one("#keep-amount", Switch).value,
            )
        elif event.input.id == "raw-value":
            try:
                value = int(event.value)
            except ValueError:
                return
            if value >= 0:
                amount.set_scaled_value(value)

    def _update_status(self, status: str) -> None:
        if self._status:
            self._status.update(status)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the masked amount input demo.")
    parser.add_argument(
        "--decimals",
        type=int,
        default=MAX_DECIMALS,
        help=f"Fractional digits of the scaled integer (0-{MAX_DECIMALS})",
    )
    parser.add_argument(
        "--value",
        type=int,
        default=DEFAULT_VALUE,
        help="Initial scaled integer value",
    )
    parser.add_argument(
        "--locale",
        default=os.environ.get("BIGINT_INPUT_LOCALE"),
        help="Locale used to pick separators (default: process environment)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset="quiet")
    configure_formatting(locale_name=args.locale)
    app = BigIntInputApp(
        decimals=clamp_decimals(str(args.decimals), MAX_DECIMALS),
        value=max(args.value, 0),
    )
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
