import os

import pandas as pd


SUPPORTED_EXTENSIONS = {".csv", ".json", ".parquet", ".xlsx"}


class UnsupportedFileTypeError(ValueError):
    pass


class MissingEngineError(ImportError):
    pass


class FileTypeHandler:
    def __init__(self, path: str):
        self.path = path
        _, ext = os.path.splitext(path)
        self.ext = ext.lower()

        if self.ext not in SUPPORTED_EXTENSIONS:
            raise UnsupportedFileTypeError(
                "Unsupported file type (use .csv, .json, .parquet, or .xlsx)"
            )

    def load(self) -> pd.DataFrame:
        if not os.path.exists(self.path) or os.path.getsize(self.path) == 0:
            return pd.DataFrame()

        if self.ext == ".csv":
            try:
                return pd.read_csv(self.path)
            except pd.errors.EmptyDataError:
                return pd.DataFrame()
        if self.ext == ".json":
            return pd.read_json(self.path)
        if self.ext == ".parquet":
            self._ensure_engine("pyarrow", "Parquet")
            return pd.read_parquet(self.path)
        # first sheet only
        self._ensure_engine("openpyxl", "XLSX")
        return pd.read_excel(self.path, sheet_name=0)

    def _ensure_engine(self, module: str, label: str):
        try:
            __import__(module)
        except ImportError as exc:
            raise MissingEngineError(
                f"{label} support requires {module}. Install via: pip install {module}"
            ) from exc

