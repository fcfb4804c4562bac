"""Result types and pydantic response models"""

from dataclasses import dataclass, field

from pydantic import BaseModel, Field


@dataclass(frozen=True, order=True)
class MatchResult:
    """A single mask occurrence.

    Ordering follows (line_number, position), which is file order.

    Attributes:
        line_number: 1-based line number
        position: 1-based column where the match starts
        text: The matched substring (same length as the mask)
    """

    line_number: int
    position: int
    text: str

    @property
    def end(self) -> int:
        """1-based column just past the match."""
        return self.position + len(self.text)


@dataclass
class SearchResult:
    """Outcome of a search over a whole file.

    Attributes:
        matches: Matches in file order
        line_count: Number of lines scanned
        workers: Number of partitions the lines were split into
        worker_counts: Matches contributed by each worker, by worker index
        elapsed: Wall time of the parallel scan and merge in seconds
    """

    matches: list[MatchResult] = field(default_factory=list)
    line_count: int = 0
    workers: int = 1
    worker_counts: list[int] = field(default_factory=list)
    elapsed: float = 0.0

    @property
    def total(self) -> int:
        return len(self.matches)


class MatchRecord(BaseModel):
    """A match as exposed in JSON output"""

    line_number: int = Field(..., ge=1, examples=[42], description='Line number (1-based)')
    position: int = Field(..., ge=1, examples=[7], description='Column where the match starts (1-based)')
    text: str = Field(..., examples=['foo'], description='Matched text')


class SearchResponse(BaseModel):
    """Search response for JSON and human-readable CLI output"""

    path: str = Field(..., examples=['/var/log/app.log'], description='Searched file')
    mask: str = Field(..., examples=['?ad'], description='Mask as given')
    total: int = Field(..., ge=0, examples=[2], description='Number of matches')
    line_count: int = Field(default=0, ge=0, description='Number of lines scanned')
    workers: int = Field(default=1, ge=1, description='Number of parallel workers')
    time: float = Field(default=0.0, description='Search time in seconds')
    matches: list[MatchRecord] = Field(default_factory=list, description='Matches in file order')

    @classmethod
    def from_result(cls, path: str, mask: str, result: SearchResult) -> 'SearchResponse':
        return cls(
            path=path,
            mask=mask,
            total=result.total,
            line_count=result.line_count,
            workers=result.workers,
            time=result.elapsed,
            matches=[MatchRecord(line_number=m.line_number, position=m.position, text=m.text) for m in result.matches],
        )

    def to_cli(self, colorize: bool = False) -> str:
        """Format response for CLI output with a summary header."""
        GREY = '\033[90m'
        BOLD_CYAN = '\033[1;36m'
        BOLD_MAGENTA = '\033[1;35m'
        YELLOW = '\033[33m'
        BOLD_RED = '\033[1;31m'
        RESET = '\033[0m'

        lines = []
        if colorize:
            lines.append(f'{GREY}Path:{RESET} {BOLD_CYAN}{self.path}{RESET}')
            lines.append(f'{GREY}Mask:{RESET} {BOLD_MAGENTA}{self.mask}{RESET}')
        else:
            lines.append(f'Path: {self.path}')
            lines.append(f'Mask: {self.mask}')
        lines.append(f'Lines: {self.line_count}, workers: {self.workers}, time: {self.time:.3f}s')
        lines.append(f'Matches: {self.total}')

        for match in self.matches:
            if colorize:
                lines.append(f'{YELLOW}{match.line_number}:{match.position}{RESET} {BOLD_RED}{match.text}{RESET}')
            else:
                lines.append(f'{match.line_number}:{match.position} {match.text}')

        return '\n'.join(lines)
