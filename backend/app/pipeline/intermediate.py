"""Intermediate model: one enriched row per biomarker result."""

BELOW_NORMAL_FLAGS = frozenset({"Low", "L"})
ABOVE_NORMAL_FLAGS = frozenset({"High", "H"})


def result_status(flag) -> str:
    # "Abnormal" and "Normal" both fall through to Normal
    if flag in BELOW_NORMAL_FLAGS:
        return "Below Normal"
    if flag in ABOVE_NORMAL_FLAGS:
        return "Above Normal"
    return "Normal"


def int_biomarker_results(
    biomarkers: list[dict],
    blood_tests: list[dict],
    users: list[dict],
    biomarker_types: list[dict],
) -> list[dict]:
    """Inner-join staged results to their test, user and type.

    A result whose test, user or type was filtered out upstream (unprocessed
    test, deleted user, ...) has no partner and is dropped. Output order
    follows the biomarker input.
    """
    tests_by_id = {row["test_id"]: row for row in blood_tests}
    users_by_id = {row["user_id"]: row for row in users}
    types_by_id = {row["biomarker_type_id"]: row for row in biomarker_types}

    enriched = []
    for b in biomarkers:
        test = tests_by_id.get(b["test_id"])
        if test is None:
            continue
        user = users_by_id.get(test["user_id"])
        if user is None:
            continue
        btype = types_by_id.get(b["biomarker_type_id"])
        if btype is None:
            continue

        enriched.append({
            "user_id": user["user_id"],
            "email": user.get("email"),
            "first_name": user.get("first_name"),
            "last_name": user.get("last_name"),
            "test_id": test["test_id"],
            "test_date": test.get("test_date"),
            "lab_name": test.get("lab_name"),
            "biomarker_id": b.get("biomarker_id"),
            "biomarker_type_id": btype["biomarker_type_id"],
            "loinc_code": btype.get("loinc_code"),
            "biomarker_name": btype.get("display_name"),
            "category": btype.get("category"),
            "value_numeric": b.get("value_numeric"),
            "value_operator": b.get("value_operator"),
            "value_text": b.get("value_text"),
            "unit": b.get("unit"),
            "flag": b.get("flag"),
            "result_status": result_status(b.get("flag")),
        })
    return enriched
