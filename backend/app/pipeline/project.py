"""The blood-test analytics model graph: raw -> staging -> intermediate -> marts."""
from app.pipeline import staging, intermediate, marts
from app.pipeline.graph import Model, ModelGraph

RAW_SOURCES = ("users", "blood_tests", "biomarker_types", "biomarkers")

MART_MODELS = ("mart_biomarker_trends", "mart_biomarker_statistics", "mart_user_health_summary")


def build_graph() -> ModelGraph:
    graph = ModelGraph()

    for name in RAW_SOURCES:
        graph.add(Model(name, materialized="source"))

    graph.add(Model("stg_users", staging.stg_users, ("users",)))
    graph.add(Model("stg_blood_tests", staging.stg_blood_tests, ("blood_tests",)))
    graph.add(Model("stg_biomarker_types", staging.stg_biomarker_types, ("biomarker_types",)))
    graph.add(Model("stg_biomarkers", staging.stg_biomarkers, ("biomarkers",)))

    graph.add(Model(
        "int_biomarker_results",
        intermediate.int_biomarker_results,
        ("stg_biomarkers", "stg_blood_tests", "stg_users", "stg_biomarker_types"),
    ))

    graph.add(Model("mart_biomarker_trends", marts.mart_biomarker_trends,
                    ("int_biomarker_results",), materialized="table"))
    graph.add(Model("mart_biomarker_statistics", marts.mart_biomarker_statistics,
                    ("int_biomarker_results",), materialized="table"))
    graph.add(Model("mart_user_health_summary", marts.mart_user_health_summary,
                    ("int_biomarker_results",), materialized="table"))
    return graph
