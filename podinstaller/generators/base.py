from pathlib import Path


class Generator:
    def generate(self) -> str:
        raise RuntimeError(f"{type(self)} must implement generate()")

    def save_as(self, path: Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            f.write(self.generate())
