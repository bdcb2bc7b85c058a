"""CSV のカート明細を検証して JSON 形式のカートに変換するパッケージ."""
__version__ = "0.1.0"
