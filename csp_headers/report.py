import json

REPORT_GROUP = "netlify-csp-endpoint"
REPORT_MAX_AGE = 10886400


def build_report_group(report_url):
    """
    Returns the Report-To header line for `report_url`, or "" when unset.
    """
    if not report_url:
        return ""
    report_to = {
        "group": REPORT_GROUP,
        "max_age": REPORT_MAX_AGE,
        "endpoints": [{"url": report_url}],
    }
    return f"Report-To: {json.dumps(report_to, separators=(',', ':'))}"
