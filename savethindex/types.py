from decimal import Decimal, InvalidOperation

import click


class MinInt(click.ParamType):
    name = "minint"

    def __init__(self, min_value):
        self.min_value = min_value

    def convert(self, value, param, ctx):
        try:
            ivalue = int(value)
        except (TypeError, ValueError):
            self.fail(f"{value} is not a valid integer", param, ctx)
        if ivalue < self.min_value:
            self.fail(
                f"{value} is less than the minimum allowed value of {self.min_value}", param, ctx
            )
        return ivalue


class PositiveDecimal(click.ParamType):
    name = "positive_decimal"

    def convert(self, value, param, ctx):
        if isinstance(value, Decimal):
            dvalue = value
        else:
            try:
                dvalue = Decimal(str(value))
            except InvalidOperation:
                self.fail(f"{value} is not a valid number", param, ctx)
        if not dvalue.is_finite() or dvalue <= 0:
            self.fail(f"{value} must be a positive number", param, ctx)
        return dvalue


class RequiredText(click.ParamType):
    """Free text that must not be blank."""

    name = "text"

    def convert(self, value, param, ctx):
        value = str(value).strip()
        if not value:
            self.fail("A value is required", param, ctx)
        return value
