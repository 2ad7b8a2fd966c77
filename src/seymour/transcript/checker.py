from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from seymour.protocol.commands import parse_command
from seymour.protocol.errors import ParseMessageError
from seymour.protocol.responses import parse_response
from seymour.reporting.logger import TraceEvent, TraceLogger
from seymour.session.framing import FramingError, ListTracker
from seymour.transcript.schema import Transcript


@dataclass
class TranscriptReport:
    name: str
    passed: bool
    lines_checked: int
    failures: List[Dict[str, Any]] = field(default_factory=list)


class TranscriptChecker:
    """Replay a transcript through the codec and collect every failure."""

    def __init__(
        self,
        transcript: Transcript,
        *,
        strict_canonical: bool = True,
        logger: Optional[TraceLogger] = None,
        session: str = "transcript",
    ) -> None:
        self.transcript = transcript
        self.strict_canonical = strict_canonical
        self.logger = logger
        self.session = session
        self.tracker = ListTracker()
        self.failures: List[Dict[str, Any]] = []
        self.lines_checked = 0

    def _fail(self, exchange: int, direction: str, line: str, kind: str, message: str) -> None:
        self.failures.append(
            {
                "exchange": exchange,
                "direction": direction,
                "line": line,
                "kind": kind,
                "message": message,
            }
        )

    def _check_line(self, exchange: int, direction: str, line: str, parse: Callable[[str], Any]) -> Optional[Any]:
        self.lines_checked += 1
        try:
            msg = parse(line)
        except ParseMessageError as e:
            self._fail(exchange, direction, line, "parse", str(e))
            if self.logger is not None:
                self.logger.log(TraceEvent.make(session=self.session, direction=direction, line=line, error=str(e)))
            return None

        if self.logger is not None:
            self.logger.log(TraceEvent.make(session=self.session, direction=direction, line=line, message=msg))

        if self.strict_canonical and msg.to_line() != line:
            self._fail(exchange, direction, line, "canonical", f"renders as {msg.to_line()!r}")
        return msg

    def run(self) -> TranscriptReport:
        for i, ex in enumerate(self.transcript.exchanges):
            self._check_line(i, "send", ex.send, parse_command)

            for line in ex.expect:
                resp = self._check_line(i, "recv", line, parse_response)
                if resp is None:
                    continue
                try:
                    self.tracker.feed(resp)
                except FramingError as e:
                    self._fail(i, "recv", line, "framing", str(e))

        if self.tracker.open_list is not None:
            last = len(self.transcript.exchanges) - 1
            self._fail(last, "recv", "", "framing", f"{self.tracker.open_list} list never ended")

        return TranscriptReport(
            name=self.transcript.name,
            passed=not self.failures,
            lines_checked=self.lines_checked,
            failures=list(self.failures),
        )


def check_transcript(
    transcript: Transcript,
    *,
    strict_canonical: bool = True,
    logger: Optional[TraceLogger] = None,
    session: str = "transcript",
) -> TranscriptReport:
    return TranscriptChecker(
        transcript,
        strict_canonical=strict_canonical,
        logger=logger,
        session=session,
    ).run()
