import pytest


@pytest.fixture
def base_form():
    return {
        "remainingSemesters": "2",
        "tuition": "10000",
        "books": "0",
        "supplies": "0",
        "rent": "0",
        "utilities": "0",
        "groceries": "0",
        "cellPhone": "0",
        "transportation": "0",
        "memberships": "0",
        "hasJob": "no",
        "scholarship": "0",
        "bursary": "0",
        "grant": "0",
        "savings": "0",
    }


@pytest.fixture
def working_form(base_form):
    form = dict(base_form)
    form.update(
        {
            "hasJob": "yes",
            "hoursPerWeekSchool": "10",
            "hourlyRate": "15",
            "scholarship": "1000",
        }
    )
    return form
