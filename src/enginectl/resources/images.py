"""Image operations: images, pull, rmi, image inspect."""

from __future__ import annotations

from enginectl.execution.runner import CommandRunner
from enginectl.resources.args import require_targets
from enginectl.resources.types import Image, ImageDetails


class ImageAPI:
    """Images: list, pull, remove and inspect."""

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def list(self, all: bool = False) -> list[Image]:
        args = ["images"]
        if all:
            args.append("--all")
        args.extend(["--format", "json"])
        return [Image.from_document(doc) for doc in self._runner.run_json(args)]

    def pull(self, image: str, *, platform: str | None = None, quiet: bool = False) -> str:
        """Pull an image and return the engine's progress output."""
        args = ["pull"]
        if platform:
            args.extend(["--platform", platform])
        if quiet:
            args.append("--quiet")
        args.append(image)
        return self._runner.run_text(args)

    def remove(self, *images: str, force: bool = False) -> None:
        require_targets("rmi", images)
        args = ["rmi"]
        if force:
            args.append("--force")
        self._runner.execute([*args, *images])

    def inspect(self, image: str) -> ImageDetails:
        doc = self._runner.run_json_first(["image", "inspect", "--format", "json", image])
        return ImageDetails.from_document(doc)
