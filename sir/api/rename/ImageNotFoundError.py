class ImageNotFoundError(LookupError):
    """A link does not resolve to an image in the vault."""

    def __init__(self, link: str):
        super().__init__(f"Image not found: {link}")
        self.link = link
