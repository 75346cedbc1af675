from importlib.metadata import PackageNotFoundError, version

try:
    version = version("SaxLex")
except PackageNotFoundError:
    version = "0.0.0"
