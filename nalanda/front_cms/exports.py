"""Spreadsheet and JSON export/import helpers for content managers."""

import csv
import io
import json
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd
from django import forms
from django.core.exceptions import FieldDoesNotExist
from django.core.serializers.json import DjangoJSONEncoder
from django.db import DatabaseError
from django.http import HttpResponse
from django.utils import timezone

CONTENT_TYPES = {
    "csv": "text/csv",
    "excel": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "json": "application/json",
}

EXTENSIONS = {"csv": "csv", "excel": "xlsx", "json": "json"}


def create_export_response(file_format: str, filename: str) -> HttpResponse:
    """Create HTTP response for file export"""
    response = HttpResponse(content_type=CONTENT_TYPES.get(file_format, "text/plain"))
    response["Content-Disposition"] = f'attachment; filename="{filename}"'
    return response


def flatten_value(value):
    """Make a column value safe for a flat spreadsheet cell."""
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            value = timezone.localtime(value)
        return value.replace(tzinfo=None)
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (list, dict)):
        return json.dumps(value)
    return value


def export_rows(manager) -> List[Dict[str, Any]]:
    return list(manager.get_queryset().values())


def export_filename(manager, file_format: str) -> str:
    today = timezone.localdate().isoformat()
    return f"{manager.table_name}_export_{today}.{EXTENSIONS[file_format]}"


def write_export(manager, file_format: str) -> Optional[HttpResponse]:
    if file_format not in CONTENT_TYPES:
        return None

    rows = export_rows(manager)
    response = create_export_response(file_format, export_filename(manager, file_format))

    if file_format == "json":
        response.write(json.dumps(rows, indent=2, cls=DjangoJSONEncoder))

    elif file_format == "excel":
        headers = [f.attname for f in manager.model._meta.concrete_fields]
        df = pd.DataFrame(
            [{k: flatten_value(v) for k, v in row.items()} for row in rows],
            columns=headers,
        )
        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            # Excel caps sheet names at 31 characters
            df.to_excel(writer, sheet_name=str(manager.title)[:31], index=False)
        response.write(buffer.getvalue())

    else:
        headers = [f.attname for f in manager.model._meta.concrete_fields]
        writer = csv.DictWriter(response, fieldnames=headers)
        writer.writeheader()
        writer.writerows({k: flatten_value(v) for k, v in row.items()} for row in rows)

    return response


def read_file_to_dataframe(file) -> Tuple[Optional[pd.DataFrame], Optional[str]]:
    """Read an uploaded CSV or Excel file into a DataFrame"""
    name = file.name.lower()
    try:
        if name.endswith(".csv"):
            df = pd.read_csv(io.StringIO(file.read().decode("utf-8")))
        elif name.endswith((".xlsx", ".xls")):
            df = pd.read_excel(file)
        else:
            return None, "Please upload a CSV or Excel file"
    except (ValueError, UnicodeDecodeError, pd.errors.ParserError) as e:
        return None, f"Error reading file: {e}"

    return df, None


def row_to_form_data(row: Dict[str, Any]) -> Dict[str, str]:
    data = {}
    for key, value in row.items():
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        data[str(key).strip()] = str(value).strip()
    return data


def checkbox_defaults(manager) -> Dict[str, str]:
    """Checkboxes missing from a sheet keep the model default instead of unticking"""
    data = {}
    for name, field in manager.form_class.base_fields.items():
        if not isinstance(field, forms.BooleanField):
            continue
        try:
            default = manager.model._meta.get_field(name).default
        except FieldDoesNotExist:
            continue
        if default is True:
            data[name] = "on"
    return data


def import_from_dataframe(manager, df: pd.DataFrame) -> Dict[str, Any]:
    """Validate every row through the manager's form and save the good ones"""
    imported_count = 0
    errors = []
    defaults = checkbox_defaults(manager)

    df = df.fillna("")
    for row_num, row in df.iterrows():
        # Spreadsheet row numbers start at 1 and the header takes the first row
        line = row_num + 2
        form = manager.form_class({**defaults, **row_to_form_data(row.to_dict())})
        if not form.is_valid():
            details = "; ".join(
                f"{field}: {' '.join(messages)}" for field, messages in form.errors.items()
            )
            errors.append(f"Row {line}: {details}")
            continue
        try:
            form.save()
            imported_count += 1
        except DatabaseError as e:
            errors.append(f"Row {line}: {e}")

    response_data = {
        "success": True,
        "imported_count": imported_count,
        "errors": errors[:10],
    }

    if errors:
        response_data["message"] = (
            f"Imported {imported_count} records with {len(errors)} errors"
        )

    return response_data
