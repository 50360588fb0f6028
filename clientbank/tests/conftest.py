"""
Shared fixtures: sample exchange files.
"""
import pytest


SIMPLE_STATEMENT = "\n".join([
    "1CClientBankExchange",
    "ВерсияФормата=1.1",
    "ДатаСоздания=01.06.2024",
    "ВремяСоздания=10:00:00",
    "СекцияДокумент=Платёжное поручение",
    "Номер=45",
    "Дата=01.06.2024",
    "Сумма=1500.55",
    "НазначениеПлатежа=Оплата по счету",
    "КонецДокумента",
    "КонецФайла",
])

FULL_STATEMENT = "\r\n".join([
    "1CClientBankExchange",
    "ВерсияФормата=1.03",
    "Кодировка=Windows",
    "Отправитель=Бухгалтерия предприятия",
    "Получатель=СберБизнес",
    "ДатаСоздания=03.07.2024",
    "ВремяСоздания=09:15:30",
    "ДатаНачала=01.07.2024",
    "ДатаКонца=02.07.2024",
    "РасчСчет=40702810900000000001",
    "",
    "СекцияРасчСчет",
    "ДатаНачала=01.07.2024",
    "ДатаКонца=02.07.2024",
    "РасчСчет=40702810900000000001",
    "НачальныйОстаток=100000.00",
    "ВсегоПоступило=25000.50",
    "ВсегоСписано=1500.55",
    "КонечныйОстаток=123499.95",
    "КонецРасчСчет",
    "",
    "СекцияДокумент=Платежное поручение",
    "Номер=17",
    "Дата=01.07.2024",
    "Сумма=1500.55",
    "ПлательщикСчет=40702810900000000001",
    "ДатаСписано=01.07.2024",
    "Плательщик=ИНН 7701234567 ООО \"Ромашка\"",
    "ПлательщикИНН=7701234567",
    "Плательщик1=ООО \"Ромашка\"",
    "Плательщик2=40702810900000000001",
    "ПлательщикБанк1=ПАО СБЕРБАНК",
    "ПлательщикБИК=044525225",
    "ПлательщикКорсчет=30101810400000000225",
    "ПолучательСчет=40702810500000000002",
    "Получатель=ИНН 7707654321 АО \"Лютик\"",
    "ПолучательИНН=7707654321",
    "Получатель1=АО \"Лютик\"",
    "Получатель2=40702810500000000002",
    "ПолучательБанк1=АО \"АЛЬФА-БАНК\"",
    "ПолучательБИК=044525593",
    "ПолучательКорсчет=30101810200000000593",
    "НазначениеПлатежа=Оплата по счету 12, НДС не облагается",
    "КонецДокумента",
    "",
    "СекцияДокумент=Банковский ордер",
    "Номер=18",
    "Дата=02.07.2024",
    "Сумма=25000,5",
    "ДатаПоступило=02.07.2024",
    "КонецДокумента",
    "КонецФайла",
    "",
])


@pytest.fixture
def simple_statement():
    """Minimal statement with a single payment order."""
    return SIMPLE_STATEMENT


@pytest.fixture
def full_statement():
    """Statement with an account section and two documents, CRLF line breaks."""
    return FULL_STATEMENT


@pytest.fixture
def statement_file(tmp_path, full_statement):
    """FULL_STATEMENT written to disk in the legacy code page."""
    path = tmp_path / "kl_to_1c.txt"
    path.write_bytes(full_statement.encode("cp1251"))
    return path
