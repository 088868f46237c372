"""Common lab tests with their LOINC codes."""

BIOMARKER_TYPES = [
    {"loinc_code": "718-7", "loinc_long_name": "Hemoglobin [Mass/volume] in Blood",
     "display_name": "Hemoglobin", "category": "Complete Blood Count", "typical_unit": "g/dL",
     "common_aliases": ["Hgb", "HGB", "Hb", "Hemoglobin"]},
    {"loinc_code": "789-8", "loinc_long_name": "Erythrocytes [#/volume] in Blood",
     "display_name": "RBC Count", "category": "Complete Blood Count", "typical_unit": "million/cmm",
     "common_aliases": ["RBC", "Red Blood Cells", "Erythrocytes"]},
    {"loinc_code": "4544-3", "loinc_long_name": "Hematocrit [Volume Fraction] of Blood",
     "display_name": "Hematocrit", "category": "Complete Blood Count", "typical_unit": "%",
     "common_aliases": ["Hct", "HCT", "Packed Cell Volume"]},
    {"loinc_code": "787-2", "loinc_long_name": "MCV [Entitic volume]",
     "display_name": "MCV", "category": "Complete Blood Count", "typical_unit": "fL",
     "common_aliases": ["Mean Corpuscular Volume"]},
    {"loinc_code": "785-6", "loinc_long_name": "MCH [Entitic mass]",
     "display_name": "MCH", "category": "Complete Blood Count", "typical_unit": "pg",
     "common_aliases": ["Mean Corpuscular Hemoglobin"]},
    {"loinc_code": "786-4", "loinc_long_name": "MCHC [Mass/volume]",
     "display_name": "MCHC", "category": "Complete Blood Count", "typical_unit": "g/dL",
     "common_aliases": ["Mean Corpuscular Hemoglobin Concentration"]},
    {"loinc_code": "6690-2", "loinc_long_name": "Leukocytes [#/volume] in Blood",
     "display_name": "WBC Count", "category": "Complete Blood Count", "typical_unit": "/cmm",
     "common_aliases": ["WBC", "White Blood Cells", "Leukocytes"]},
    {"loinc_code": "770-8", "loinc_long_name": "Neutrophils/100 leukocytes in Blood",
     "display_name": "Neutrophils", "category": "Complete Blood Count", "typical_unit": "%",
     "common_aliases": ["Neutrophils", "Neut"]},
    {"loinc_code": "736-9", "loinc_long_name": "Lymphocytes/100 leukocytes in Blood",
     "display_name": "Lymphocytes", "category": "Complete Blood Count", "typical_unit": "%",
     "common_aliases": ["Lymphocytes", "Lymph"]},
    {"loinc_code": "713-8", "loinc_long_name": "Eosinophils/100 leukocytes in Blood",
     "display_name": "Eosinophils", "category": "Complete Blood Count", "typical_unit": "%",
     "common_aliases": ["Eosinophils", "Eos"]},
    {"loinc_code": "5905-5", "loinc_long_name": "Monocytes/100 leukocytes in Blood",
     "display_name": "Monocytes", "category": "Complete Blood Count", "typical_unit": "%",
     "common_aliases": ["Monocytes", "Mono"]},
    {"loinc_code": "704-7", "loinc_long_name": "Basophils/100 leukocytes in Blood",
     "display_name": "Basophils", "category": "Complete Blood Count", "typical_unit": "%",
     "common_aliases": ["Basophils", "Baso"]},
    {"loinc_code": "777-3", "loinc_long_name": "Platelets [#/volume] in Blood",
     "display_name": "Platelet Count", "category": "Complete Blood Count", "typical_unit": "/cmm",
     "common_aliases": ["Platelets", "PLT"]},
    {"loinc_code": "32623-1", "loinc_long_name": "Platelet mean volume [Entitic volume] in Blood",
     "display_name": "MPV", "category": "Complete Blood Count", "typical_unit": "fL",
     "common_aliases": ["Mean Platelet Volume"]},
    {"loinc_code": "2345-7", "loinc_long_name": "Glucose [Mass/volume] in Serum or Plasma",
     "display_name": "Glucose", "category": "Metabolic Panel", "typical_unit": "mg/dL",
     "common_aliases": ["Blood Glucose", "Blood Sugar", "Glu"]},
    {"loinc_code": "2093-3", "loinc_long_name": "Cholesterol [Mass/volume] in Serum or Plasma",
     "display_name": "Total Cholesterol", "category": "Lipid Panel", "typical_unit": "mg/dL",
     "common_aliases": ["Cholesterol", "Total Chol", "Chol"]},
    {"loinc_code": "2571-8", "loinc_long_name": "Triglyceride [Mass/volume] in Serum or Plasma",
     "display_name": "Triglycerides", "category": "Lipid Panel", "typical_unit": "mg/dL",
     "common_aliases": ["TG", "Trig"]},
    {"loinc_code": "2085-9", "loinc_long_name": "Cholesterol in HDL [Mass/volume] in Serum or Plasma",
     "display_name": "HDL Cholesterol", "category": "Lipid Panel", "typical_unit": "mg/dL",
     "common_aliases": ["HDL", "Good Cholesterol"]},
    {"loinc_code": "13457-7", "loinc_long_name": "Cholesterol in LDL [Mass/volume] in Serum or Plasma",
     "display_name": "LDL Cholesterol", "category": "Lipid Panel", "typical_unit": "mg/dL",
     "common_aliases": ["LDL", "Bad Cholesterol"]},
]
