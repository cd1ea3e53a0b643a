from __future__ import annotations

from datetime import MAXYEAR, MINYEAR, date

from flask import Flask, jsonify, request

from ..common.http import json_body, json_endpoint
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _int_arg(name: str, default=None, *, low=None, high=None) -> int:
        value = request.args.get(name)
        if value is None and default is not None:
            return default
        try:
            number = int(value)
        except (TypeError, ValueError):
            raise ValidationError(f"Parâmetro inválido: {name}") from None
        if (low is not None and number < low) or (high is not None and number > high):
            raise ValidationError(f"Parâmetro inválido: {name}")
        return number

    @app.route("/api/holidays", methods=["GET"], endpoint="holidays_list")
    @json_endpoint
    def holidays_list():
        year = _int_arg("year", date.today().year, low=MINYEAR, high=MAXYEAR)
        holidays = container.holiday_service.list_for_year(year)
        return jsonify({"year": year, "holidays": [container.holiday_service.to_ui(h) for h in holidays]})

    @app.route("/api/holidays", methods=["POST"], endpoint="holidays_add")
    @json_endpoint
    def holidays_add():
        data = json_body()
        holiday = container.holiday_service.add(date_text=str(data.get("date") or ""), name=str(data.get("name") or ""))
        return jsonify({"holiday": container.holiday_service.to_ui(holiday)}), 201

    @app.route("/api/holidays/<holiday_id>", methods=["DELETE"], endpoint="holidays_delete")
    @json_endpoint
    def holidays_delete(holiday_id: str):
        container.holiday_service.delete(holiday_id=holiday_id)
        return "", 204

    @app.route("/api/holidays/resolve", methods=["GET"], endpoint="holidays_resolve")
    @json_endpoint
    def holidays_resolve():
        day = _int_arg("day", low=1, high=31)
        month = _int_arg("month", low=1, high=12)
        year = _int_arg("year", low=MINYEAR, high=MAXYEAR)
        name = container.holiday_service.resolve(day=day, month=month, year=year)
        return jsonify({"day": day, "month": month, "year": year, "name": name})
