"""S3 からの読み込み実装."""
import logging
from pathlib import Path, PurePosixPath

import boto3
from botocore.exceptions import ClientError

from cart_parser.domain.ports import FileReader

logger = logging.getLogger(__name__)


class S3FileReader(FileReader):
    """S3 バケット上のCSVオブジェクトを読み込む.

    絶対パス "/carts/a.csv" はキー "<prefix>carts/a.csv" に対応する。
    """

    NOT_FOUND_CODES = ("NoSuchKey", "404", "NotFound")

    def __init__(
        self,
        bucket: str,
        prefix: str = "",
        encoding: str = "utf-8",
        client=None,
    ) -> None:
        """初期化.

        Args:
            bucket: バケット名
            prefix: キーの接頭辞
            encoding: オブジェクトの文字コード
            client: boto3 S3 クライアント（省略時は生成する）
        """
        if not bucket:
            raise ValueError("S3 bucket name cannot be empty")
        self._bucket = bucket
        self._prefix = prefix
        self._encoding = encoding
        self._client = client or boto3.client("s3")

    def object_key(self, path: str | Path) -> str:
        """パスをオブジェクトキーに変換する."""
        relative = str(PurePosixPath(str(path).replace("\\", "/"))).lstrip("/")
        return f"{self._prefix}{relative}"

    def read(self, path: str | Path) -> str:
        """オブジェクト全体をテキストとして読み込む."""
        key = self.object_key(path)
        try:
            response = self._client.get_object(Bucket=self._bucket, Key=key)
        except ClientError as e:
            if e.response["Error"]["Code"] in self.NOT_FOUND_CODES:
                raise FileNotFoundError(f"No such object: s3://{self._bucket}/{key}") from e
            logger.error("Failed to read s3://%s/%s: %s", self._bucket, key, e)
            raise OSError(f"Failed to read s3://{self._bucket}/{key}") from e
        return response["Body"].read().decode(self._encoding)
