import re


def remove_leading_slash(path: str) -> str:
    return re.sub(r"^/+", "", path)


def remove_trailing_slash(path: str) -> str:
    return re.sub(r"/+$", "", path)


def add_trailing_slash(path: str) -> str:
    return remove_trailing_slash(path) + "/"
