import csv, io
from .reporting import MatchReport

def report_to_csv(report: MatchReport, category: str = "") -> bytes:
    buf=io.StringIO(); w=csv.writer(buf)
    w.writerow(["category","token","frequency","weight","contribution"])
    for r in report.records:
        w.writerow([category, r.token, r.frequency, r.weight, r.contribution])
    s = report.summary
    if s is not None:
        w.writerow([])
        w.writerow(["total_matches","total_unique_matches","total_tokens","percent_matches"])
        w.writerow([s.total_matches, s.total_unique_matches, s.total_tokens, s.percent_matches])
    return buf.getvalue().encode()
