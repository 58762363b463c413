import pandas as pd


class DefaultDfInitializer:
    def create(self, rows: int = 42) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "id": range(1, rows + 1),
                "name": [f"row {i}" for i in range(1, rows + 1)],
                "value": [round(i * 1.5, 1) for i in range(1, rows + 1)],
            }
        )
