import math
from dataclasses import dataclass
from typing import Dict

@dataclass(frozen=True)
class Pagination:
    """1-based page window over a filtered result set."""
    page: int = 1
    limit: int = 50

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    def meta(self, results: int, total: int) -> Dict[str, int]:
        return {
            "results": results,
            "total": total,
            "page": self.page,
            "pages": math.ceil(total / self.limit) if self.limit else 0,
        }
