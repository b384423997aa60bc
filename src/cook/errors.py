class CookError(Exception):
    pass


class ConfigError(CookError):
    pass


class MissingFileError(CookError):
    pass


class UsageError(CookError):
    pass


class MalformedCookbookError(CookError):
    def __init__(self, message: str = "malformed cookbook") -> None:
        super().__init__(message)


class RecipeNotFoundError(CookError):
    def __init__(self, name: str, argument_count: int) -> None:
        self.name = name
        self.argument_count = argument_count
        super().__init__(f"recipe not found: {name} with {argument_count} argument(s)")


class ShellError(CookError):
    pass
