from financial_system.domain.monetary.currency import Currency


# Americas
BRL = Currency("BRL", 2, "R$", "Brazilian Real")
USD = Currency("USD", 2, "$", "US Dollar")
CAD = Currency("CAD", 2, "$", "Canadian Dollar")
MXN = Currency("MXN", 2, "$", "Mexican Peso")
ARS = Currency("ARS", 2, "$", "Argentine Peso")
CLP = Currency("CLP", 0, "$", "Chilean Peso")

# Europe
EUR = Currency("EUR", 2, "€", "Euro")
GBP = Currency("GBP", 2, "£", "British Pound")
CHF = Currency("CHF", 2, "CHF", "Swiss Franc")
SEK = Currency("SEK", 2, "kr", "Swedish Krona")
NOK = Currency("NOK", 2, "kr", "Norwegian Krone")
ISK = Currency("ISK", 0, "kr", "Icelandic Krona")

# Asia & Pacific
JPY = Currency("JPY", 0, "¥", "Japanese Yen")
CNY = Currency("CNY", 2, "¥", "Chinese Yuan")
KRW = Currency("KRW", 0, "₩", "South Korean Won")
INR = Currency("INR", 2, "₹", "Indian Rupee")
AUD = Currency("AUD", 2, "$", "Australian Dollar")

# Middle East & Africa (three fraction digits)
BHD = Currency("BHD", 3, "BD", "Bahraini Dinar")
KWD = Currency("KWD", 3, "KD", "Kuwaiti Dinar")
TND = Currency("TND", 3, "DT", "Tunisian Dinar")

# Predefined currencies used to build the default catalog
PREDEFINED_CURRENCIES: tuple[Currency, ...] = (
    BRL,
    USD,
    CAD,
    MXN,
    ARS,
    CLP,
    EUR,
    GBP,
    CHF,
    SEK,
    NOK,
    ISK,
    JPY,
    CNY,
    KRW,
    INR,
    AUD,
    BHD,
    KWD,
    TND,
)
