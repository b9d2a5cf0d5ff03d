from src.roster_manager.roster_manager.core.enums import AttendanceStatus
from src.roster_manager.roster_manager.roster.model import StudentRecord
from src.roster_manager.roster_manager.transcoder.csv_export import escape_name, export_csv


def test_export_format():
    roster = [
        StudentRecord(id=1, name="Alice Johnson", status=AttendanceStatus.PRESENT),
        StudentRecord(id=2, name='Anne "AJ" Lee', status=AttendanceStatus.UNMARKED),
    ]

    assert export_csv(roster) == 'Id,Name,Status\n1,"Alice Johnson",Present\n2,"Anne ""AJ"" Lee",Unmarked'


def test_export_of_empty_roster_is_header_only():
    assert export_csv([]) == "Id,Name,Status"


def test_name_is_always_quoted():
    assert escape_name("Bob") == '"Bob"'
    assert escape_name('"') == '""""'
