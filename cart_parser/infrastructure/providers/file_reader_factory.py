"""FileReader ファクトリ."""
import logging
import os

from cart_parser.domain.ports import FileReader

logger = logging.getLogger(__name__)


def create_file_reader() -> FileReader:
    """環境変数に基づいてFileReaderを生成する.

    CART_FILE_READER:
        "local" → LocalFileReader（デフォルト）
        "s3"    → S3FileReader（CART_S3_BUCKET, CART_S3_PREFIX を参照）
    CART_CSV_ENCODING:
        ファイルの文字コード（未設定時は utf-8）
    """
    reader_type = os.environ.get("CART_FILE_READER")
    encoding = os.environ.get("CART_CSV_ENCODING") or "utf-8"

    if reader_type == "s3":
        bucket = os.environ.get("CART_S3_BUCKET")
        if not bucket:
            raise ValueError("CART_S3_BUCKET is required when CART_FILE_READER=s3")
        from cart_parser.infrastructure.providers.s3_file_reader import S3FileReader

        return S3FileReader(
            bucket=bucket,
            prefix=os.environ.get("CART_S3_PREFIX", ""),
            encoding=encoding,
        )

    if reader_type and reader_type != "local":
        logger.warning("Unknown CART_FILE_READER=%s, falling back to local", reader_type)

    from cart_parser.infrastructure.providers.local_file_reader import LocalFileReader

    return LocalFileReader(encoding=encoding)
