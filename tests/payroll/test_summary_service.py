from src.plantation_checkroll.plantation_checkroll.payroll.service import CheckrollSummaryService


def test_summary_of_standard_scenarios(synthesizer):
    records = synthesizer.generate_test_scenarios()
    summary = CheckrollSummaryService().build_summary(records)

    assert summary.total_records == 7
    assert [(r.key, r.count) for r in summary.job_types] == [(3, 2), (5, 1), (6, 2), (7, 1), (8, 1)]
    assert [(r.key, r.count) for r in summary.day_types] == [(1, 2), (2, 2), (3, 3)]
    assert summary.holiday_count == 2
    assert summary.holiday_percentage == 28.6
    # 1.5 + 1 + 0.75 + 0.5 + 1 + 1 + 1
    assert summary.total_man_days == 6.75
    assert summary.total_over_kilo == 3


def test_summary_of_empty_batch():
    summary = CheckrollSummaryService().build_summary([])
    assert summary.total_records == 0
    assert summary.job_types == []
    assert summary.holiday_percentage == 0.0
    assert summary.to_dict()["totalManDays"] == 0.0
