"""Document reader turning imported TXT and DOCX files into text."""

import logging
from pathlib import Path

import chardet

logger = logging.getLogger(__name__)

# Supported file extensions mapped to format identifiers
SUPPORTED_FORMATS: dict[str, str] = {
    ".txt": "txt",
    ".md": "txt",
    ".docx": "docx",
}

# "gbk" is the legacy Chinese encoding; "auto" detects with chardet
SUPPORTED_ENCODINGS: tuple[str, ...] = ("utf-8", "gbk", "auto")

# Codec used for each fixed tag. "gbk" decodes as GB18030, its superset,
# so GB18030-only characters such as Extension A ideographs still load.
TEXT_CODECS: dict[str, str] = {
    "utf-8": "utf-8-sig",
    "gbk": "gb18030",
}


class FileReadError(Exception):
    """Raised when a file exists but its content cannot be decoded."""


class DocumentReader:
    """Reads imported novel files into a single decoded string.

    Plain text files are decoded with the selected encoding. DOCX files
    are always read through python-docx and ignore the encoding.
    """

    def read(self, file_path: str | Path, encoding: str = "utf-8") -> str:
        """Read a file into text.

        Args:
            file_path: Path to the file.
            encoding: One of SUPPORTED_ENCODINGS, used for text files.

        Returns:
            The decoded file content.

        Raises:
            FileNotFoundError: If file_path does not exist.
            ValueError: If the file format or encoding is not supported.
            FileReadError: If the content cannot be decoded.
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        file_format = self._detect_format(path)
        if file_format == "docx":
            text = self._read_docx(path)
        else:
            text = self._read_txt(path, self._check_encoding(encoding))

        logger.info("Read %d characters from %s", len(text), path.name)
        return text

    def _detect_format(self, file_path: Path) -> str:
        """Determine file format from extension.

        Raises:
            ValueError: If extension is not supported.
        """
        ext = file_path.suffix.lower()
        if ext not in SUPPORTED_FORMATS:
            raise ValueError(
                f"Unsupported file format: '{ext}'. "
                f"Supported: {', '.join(SUPPORTED_FORMATS.keys())}"
            )
        return SUPPORTED_FORMATS[ext]

    def _check_encoding(self, encoding: str) -> str:
        normalized = encoding.lower()
        if normalized not in SUPPORTED_ENCODINGS:
            raise ValueError(
                f"Unsupported encoding: '{encoding}'. "
                f"Supported: {', '.join(SUPPORTED_ENCODINGS)}"
            )
        return normalized

    def _read_txt(self, file_path: Path, encoding: str) -> str:
        """Decode a plain text or Markdown file.

        "utf-8" strips a leading byte order mark. "auto" tries UTF-8
        first, then chardet detection, then GB18030 as a last resort.

        Args:
            file_path: Path to the text file.
            encoding: A normalized entry of SUPPORTED_ENCODINGS.

        Returns:
            The file content as a string.

        Raises:
            FileReadError: If the bytes do not decode.
        """
        raw_bytes = file_path.read_bytes()

        if encoding == "auto":
            return self._decode_detected(raw_bytes, file_path)

        codec = TEXT_CODECS[encoding]
        try:
            return raw_bytes.decode(codec)
        except UnicodeDecodeError as exc:
            logger.error("Failed to decode %s as %s", file_path, encoding)
            raise FileReadError(
                f"Failed to read file {file_path.name}: "
                "check the file encoding or format"
            ) from exc

    def _decode_detected(self, raw_bytes: bytes, file_path: Path) -> str:
        try:
            return raw_bytes.decode("utf-8-sig")
        except UnicodeDecodeError:
            pass

        detected = chardet.detect(raw_bytes)
        encoding = detected.get("encoding") or "gb18030"
        confidence = detected.get("confidence") or 0

        if confidence < 0.7:
            logger.warning(
                "Low confidence encoding detection for %s: %s (%.0f%%)",
                file_path,
                encoding,
                confidence * 100,
            )

        try:
            return raw_bytes.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            # GB18030 is a superset of GBK and GB2312
            try:
                return raw_bytes.decode("gb18030")
            except UnicodeDecodeError as exc:
                logger.error("Failed to decode file: %s", file_path)
                raise FileReadError(
                    f"Failed to read file {file_path.name}: "
                    "check the file encoding or format"
                ) from exc

    def _read_docx(self, file_path: Path) -> str:
        """Extract text from a DOCX file using python-docx.

        Each non-empty paragraph becomes one line, so a heading paragraph
        stays on its own line for chapter detection.

        Args:
            file_path: Path to the DOCX file.

        Returns:
            Paragraph text joined with newlines.

        Raises:
            FileReadError: If the document cannot be opened.
        """
        import docx

        try:
            doc = docx.Document(str(file_path))
        except Exception as exc:
            logger.exception("Failed to parse DOCX: %s", file_path)
            raise FileReadError(
                f"Failed to read file {file_path.name}: "
                "check the file encoding or format"
            ) from exc

        paragraphs = [para.text for para in doc.paragraphs if para.text.strip()]
        return "\n".join(paragraphs)
