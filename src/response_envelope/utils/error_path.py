"""Get the source location of a raised error."""

import traceback

__all__ = ["get_error_path"]


def get_error_path(err: Exception) -> str:
    """Extract formatted source location from an exception traceback.

    Formats the location where the error was raised relative to the
    response_envelope package, with line number and function name.

    Args:
        err: The exception carrying traceback information

    Returns:
        A string in the format "filename:line (fn:function_name)", or
        "unknown" if the exception was never raised
    """
    frames = traceback.extract_tb(err.__traceback__)
    if not frames:
        return "unknown"
    filename, line, func, _ = frames[-1]

    if "response_envelope" in filename:
        filename = "response_envelope" + filename.split("response_envelope")[-1]
    return f"{filename}:{line} (fn:{func})"
