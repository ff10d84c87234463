class ImageValidationError(ValueError):
    status_code = 400


class EmptyImageError(ImageValidationError):
    def __init__(self):
        super().__init__("Empty image file")


class ImageTooLargeError(ImageValidationError):
    status_code = 413

    def __init__(self, size: int, max_bytes: int):
        super().__init__("Image too large")
        self.size = size
        self.max_bytes = max_bytes
