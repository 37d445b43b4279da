"""Cross-run state shared by reporters during a watch session."""

from dataclasses import dataclass


@dataclass(kw_only=True)
class RunState:
    """Outcome history of the session.

    The session owns a single instance and hands it to every reporter that
    needs it, so all of them observe the same history.
    """

    previous_success: bool = False
    first_run: bool = True
