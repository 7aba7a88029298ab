from dataclasses import dataclass


@dataclass(frozen=True)
class PageSize:
    width: float  # points
    height: float  # points

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height
