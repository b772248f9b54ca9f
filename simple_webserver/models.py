"""Request snapshot used by the /payload echo route"""
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from starlette.requests import Request

# Carried in the request target rather than the header map
SKIPPED_HEADERS = {"host"}


def canonical_header_key(name: str) -> str:
    """Canonical MIME form: 'x-forwarded-for' -> 'X-Forwarded-For'."""
    return "-".join(part[:1].upper() + part[1:].lower() for part in name.split("-"))


def group_headers(raw: Iterable[Tuple[bytes, bytes]]) -> Tuple[Tuple[str, Tuple[str, ...]], ...]:
    """Group raw header pairs by canonical name, keeping arrival order."""
    grouped: Dict[str, List[str]] = {}
    for name, value in raw:
        key = canonical_header_key(name.decode("latin-1"))
        if key.lower() in SKIPPED_HEADERS:
            continue
        grouped.setdefault(key, []).append(value.decode("latin-1"))
    return tuple((key, tuple(values)) for key, values in grouped.items())


@dataclass(frozen=True)
class RequestSnapshot:
    method: str
    headers: Tuple[Tuple[str, Tuple[str, ...]], ...]
    body: bytes

    @classmethod
    def capture(cls, request: Request, body: bytes) -> "RequestSnapshot":
        return cls(method=request.method, headers=group_headers(request.headers.raw), body=body)

    def lines(self) -> List[bytes]:
        """Dump lines; every line but the final payload line ends in a newline."""
        out = [f"Method: {self.method}\n".encode("latin-1")]
        if self.headers:
            out.append(b"Headers:\n")
            for key, values in self.headers:
                for value in values:
                    out.append(f"{key}: {value}\n".encode("latin-1"))
        out.append(b"Payload: " + self.body)
        return out

    def render(self) -> bytes:
        return b"".join(self.lines())
