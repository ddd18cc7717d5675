"""
Patient record text formatting.

Renders the patient, diagnosis, and medication rows behind a care plan
into the text blob the attribution prompt embeds.

Dependencies: backend.boundary.db.models
System role: Patient record assembly for attribution
"""

from backend.boundary.db.models.care_plan_model import CarePlanModel

NOT_SPECIFIED = "Not specified"


def _join_or_none(values: list[str] | None) -> str:
    """Comma-join a list, or "None" when empty."""
    return ", ".join(values) if values else "None"


def build_patient_record_text(care_plan: CarePlanModel) -> str:
    """
    Build the patient record text for a care plan.

    Args:
        care_plan: Care plan with order and order.patient loaded

    Returns:
        str: Patient, diagnosis, and medication information blocks
    """
    order = care_plan.order
    patient = order.patient

    weight = f"{patient.weight_kg} kg" if patient.weight_kg else NOT_SPECIFIED

    return f"""PATIENT INFORMATION:
Name: {patient.first_name} {patient.last_name}
MRN: {patient.mrn}
Date of Birth: {patient.date_of_birth or NOT_SPECIFIED}
Sex: {patient.sex or NOT_SPECIFIED}
Weight: {weight}
Allergies: {patient.allergies or "None reported"}

DIAGNOSIS INFORMATION:
Primary Diagnosis: {order.primary_diagnosis}
Additional Diagnoses: {_join_or_none(order.additional_diagnoses)}

MEDICATION INFORMATION:
Current Medication: {order.medication_name}
Medication History: {_join_or_none(order.medication_history)}"""
