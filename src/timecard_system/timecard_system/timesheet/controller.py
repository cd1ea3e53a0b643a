from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, json_endpoint
from ..core.exceptions import ValidationError
from ..container import Container
from .service import day_record_from_payload, day_record_to_payload, holiday_from_payload


def register(app: Flask, container: Container) -> None:
    @app.route("/api/timesheet/ingest", methods=["POST"], endpoint="timesheet_ingest")
    @json_endpoint
    def timesheet_ingest():
        rows = json_body().get("rows")
        if not isinstance(rows, list):
            raise ValidationError("rows deve ser uma lista")
        records = container.timesheet_service.ingest(r for r in rows if isinstance(r, dict))
        return jsonify({"days": [day_record_to_payload(r) for r in records]})

    @app.route("/api/timesheet/calculate", methods=["POST"], endpoint="timesheet_calculate")
    @json_endpoint
    def timesheet_calculate():
        data = json_body()
        try:
            year = int(data["year"])
            month = int(data["month"])
        except (KeyError, TypeError, ValueError):
            raise ValidationError("Mês de referência inválido") from None
        if not 1 <= month <= 12:
            raise ValidationError("Mês de referência inválido")

        days = [day_record_from_payload(d) for d in data.get("days") or []]
        holidays = [holiday_from_payload(h) for h in data.get("holidays") or []]
        if data.get("includeStoredHolidays", True):
            holidays += container.holiday_service.list_custom()

        service = container.timesheet_service
        result = service.recompute(
            days,
            year=year,
            month=month,
            schedule=service.build_schedule(data.get("schedule")),
            custom_holidays=holidays,
        )
        return jsonify(service.to_ui(result))

    @app.route("/api/timesheet/days/<action>", methods=["POST"], endpoint="timesheet_day_action")
    @json_endpoint
    def timesheet_day_action(action: str):
        data = json_body()
        record = day_record_from_payload(data.get("day") or {})
        service = container.timesheet_service

        if action == "abono":
            record = service.toggle_abono(record)
        elif action == "sunday-mode":
            record = service.cycle_sunday_mode(record)
        elif action == "dsr":
            record = service.cycle_dsr(record, is_compensatory_rest=bool(data.get("isCompensatoryRest")))
        elif action == "punch":
            record = service.set_punch(record, str(data.get("column") or ""), data.get("value"))
        else:
            raise ValidationError(f"Ação desconhecida: {action}")

        return jsonify({"day": day_record_to_payload(record)})
