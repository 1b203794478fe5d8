from pydantic import BaseModel, ConfigDict

class TreasuryBillRatesOut(BaseModel):
    model_config = ConfigDict(frozen=True)

    ROUND_B1_YIELD_4WK_2: str = ""
    ROUND_B1_YIELD_8WK_2: str = ""
    ROUND_B1_YIELD_13WK_2: str = ""
    ROUND_B1_YIELD_17WK_2: str = ""
    ROUND_B1_YIELD_26WK_2: str = ""
    ROUND_B1_YIELD_52WK_2: str = ""
    INDEX_DATE: str = ""

class TreasuryYieldCurveOut(BaseModel):
    model_config = ConfigDict(frozen=True)

    BC_1MONTH: str = ""
    BC_2MONTH: str = ""
    BC_3MONTH: str = ""
    BC_4MONTH: str = ""
    BC_6MONTH: str = ""
    BC_1YEAR: str = ""
    BC_2YEAR: str = ""
    BC_3YEAR: str = ""
    BC_5YEAR: str = ""
    BC_7YEAR: str = ""
    BC_10YEAR: str = ""
    BC_20YEAR: str = ""
    BC_30YEAR: str = ""
    NEW_DATE: str = ""
