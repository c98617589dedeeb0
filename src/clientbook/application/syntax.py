"""Argument prefixes understood by the command parsers."""

from clientbook.application.tokenizer import Prefix

PREFIX_NAME = Prefix("n/")
PREFIX_PHONE = Prefix("p/")
PREFIX_EMAIL = Prefix("e/")
PREFIX_ADDRESS = Prefix("a/")
PREFIX_NEXT_OF_KIN_NAME = Prefix("nkn/")
PREFIX_NEXT_OF_KIN_PHONE = Prefix("nkp/")
PREFIX_FINANCIAL_PLAN = Prefix("fp/")
PREFIX_TAG = Prefix("t/")
PREFIX_REMARK = Prefix("r/")
PREFIX_APPOINTMENT_NAME = Prefix("ap/")
PREFIX_APPOINTMENT_DATE = Prefix("d/")
