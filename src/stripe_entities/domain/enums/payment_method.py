from __future__ import annotations

from enum import Enum, unique


@unique
class PaymentMethodType(Enum):
    """Payment method type identifiers accepted in ``payment_method_types``."""

    ACSS_DEBIT = "acss_debit"
    AFFIRM = "affirm"
    AFTERPAY_CLEARPAY = "afterpay_clearpay"
    ALIPAY = "alipay"
    AU_BECS_DEBIT = "au_becs_debit"
    BACS_DEBIT = "bacs_debit"
    BANCONTACT = "bancontact"
    BLIK = "blik"
    BOLETO = "boleto"
    CARD = "card"
    CASHAPP = "cashapp"
    CUSTOMER_BALANCE = "customer_balance"
    EPS = "eps"
    FPX = "fpx"
    GIROPAY = "giropay"
    GRABPAY = "grabpay"
    IDEAL = "ideal"
    KLARNA = "klarna"
    KONBINI = "konbini"
    LINK = "link"
    OXXO = "oxxo"
    P24 = "p24"
    PAYNOW = "paynow"
    PAYPAL = "paypal"
    PIX = "pix"
    PROMPTPAY = "promptpay"
    SEPA_DEBIT = "sepa_debit"
    SOFORT = "sofort"
    US_BANK_ACCOUNT = "us_bank_account"
    WECHAT_PAY = "wechat_pay"
