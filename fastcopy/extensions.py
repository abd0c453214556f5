from pathlib import Path
from typing import Optional, Union

# Closed allow-list, matched exactly (no case folding).
ALLOWED = frozenset({
    "aac", "abw", "arc", "avif", "avi", "azw", "bin", "bmp", "bz", "bz2",
    "cda", "csh", "css", "csv", "doc", "docx", "eot", "epub", "gz", "gif",
    "htm", "ico", "ics", "jar", "jpeg", "js", "json", "jsonld", "mid", "mjs",
    "mp3", "mp4", "mpeg", "mpkg", "odp", "ods", "odt", "oga", "ogv", "ogx",
    "opus", "otf", "png", "pdf", "php", "ppt", "pptx", "rar", "rtf", "sh",
    "svg", "tar", "tif", "ts", "ttf", "txt", "vsd", "wav", "weba", "webm",
    "webp", "woff", "woff2", "xhtml", "xls", "xlsx", "xml", "xul", "zip",
    "3gp", "3g2", "7z",
})

def extension_of(path: Union[str, Path]) -> Optional[str]:
    """Text after the last '.' of the final component; None for bare names and dotfiles."""
    name = Path(path).name
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return None
    return ext

def is_allowed(path: Union[str, Path]) -> bool:
    ext = extension_of(path)
    return ext is not None and ext in ALLOWED
