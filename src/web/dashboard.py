"""
HTML rendering for the feedback dashboard.

Pure presentation: takes the ordered records and the aggregate counts and
returns the page markup. All customer and model text is escaped.
"""

import html
from typing import List

from src.models.schemas import FeedbackRecord, SentimentCounts

PAGE_TITLE = "Feedback Intelligence"

STYLES = """
body { font-family: 'Segoe UI', system-ui, sans-serif; background: #f8fafc; color: #1e293b; margin: 0; padding: 20px; }
.container { max-width: 1000px; margin: 0 auto; }
header { text-align: center; margin-bottom: 40px; }
h1 { font-size: 2.5rem; color: #f6821f; margin-bottom: 10px; }
p.subtitle { color: #64748b; font-size: 1.1rem; }
.grid { display: grid; grid-template-columns: 1fr 2fr; gap: 20px; }
@media (max-width: 768px) { .grid { grid-template-columns: 1fr; } }
.card { background: white; padding: 25px; border-radius: 12px; box-shadow: 0 4px 6px -1px rgba(0, 0, 0, 0.1); border: 1px solid #e2e8f0; }
h2 { margin-top: 0; font-size: 1.25rem; border-bottom: 2px solid #f1f5f9; padding-bottom: 10px; margin-bottom: 20px; color: #334155; }
textarea { width: 100%; padding: 12px; border: 2px solid #e2e8f0; border-radius: 8px; margin-bottom: 15px; font-family: inherit; resize: vertical; min-height: 100px; box-sizing: border-box; }
textarea:focus { border-color: #f6821f; outline: none; }
button { background: #f6821f; color: white; border: none; padding: 12px 24px; border-radius: 8px; font-weight: bold; cursor: pointer; width: 100%; }
button:hover { background: #ea580c; }
.table-container { overflow-x: auto; }
table { width: 100%; border-collapse: collapse; margin-top: 10px; }
th { text-align: left; padding: 12px; background: #f8fafc; font-size: 0.85rem; text-transform: uppercase; letter-spacing: 0.05em; color: #64748b; font-weight: 600; }
td { padding: 16px 12px; border-bottom: 1px solid #e2e8f0; }
tr:last-child td { border-bottom: none; }
.badge { padding: 4px 10px; border-radius: 99px; font-size: 0.75rem; font-weight: 700; text-transform: uppercase; display: inline-block; }
.bg-Positive { background: #dcfce7; color: #166534; }
.bg-Negative { background: #fee2e2; color: #991b1b; }
.bg-Neutral { background: #f1f5f9; color: #475569; }
.bg-Error { background: #fee2e2; color: #991b1b; }
.summary { font-style: italic; color: #475569; }
"""


def badge_class(sentiment: str) -> str:
    """CSS class for a sentiment badge. Later matches take precedence."""
    badge = "bg-Neutral"
    for label in ("Positive", "Negative", "Error"):
        if label in sentiment:
            badge = f"bg-{label}"
    return badge


def _render_row(record: FeedbackRecord) -> str:
    sentiment = record.sentiment or ""
    return (
        "<tr>"
        f"<td>{html.escape(record.customer_text)}</td>"
        f'<td><span class="badge {badge_class(sentiment)}">'
        f"{html.escape(sentiment or 'Pending')}</span></td>"
        f'<td class="summary">"{html.escape(record.summary or "...")}"</td>'
        "</tr>"
    )


def _render_chart(counts: SentimentCounts) -> str:
    return f"""
<script>
  new Chart(document.getElementById('sentimentChart'), {{
    type: 'doughnut',
    data: {{
      labels: ['Positive', 'Negative', 'Neutral'],
      datasets: [{{
        data: [{counts.positive}, {counts.negative}, {counts.neutral}],
        backgroundColor: ['#22c55e', '#ef4444', '#94a3b8'],
        borderWidth: 0,
        hoverOffset: 4
      }}]
    }},
    options: {{
      responsive: true,
      plugins: {{ legend: {{ position: 'bottom', labels: {{ usePointStyle: true, padding: 20 }} }} }},
      cutout: '70%'
    }}
  }});
</script>"""


def render_dashboard(records: List[FeedbackRecord], counts: SentimentCounts) -> str:
    """
    Render the dashboard page.

    Args:
        records: Feedback records, already ordered most recent first
        counts: Aggregate sentiment counts for the chart

    Returns:
        Complete HTML document
    """
    rows = "\n".join(_render_row(record) for record in records)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{PAGE_TITLE}</title>
  <script src="https://cdn.jsdelivr.net/npm/chart.js"></script>
  <style>{STYLES}</style>
</head>
<body>
  <div class="container">
    <header>
      <h1>{PAGE_TITLE}</h1>
      <p class="subtitle">AI sentiment analysis of customer feedback</p>
    </header>
    <div class="grid">
      <div style="display: flex; flex-direction: column; gap: 20px;">
        <div class="card">
          <h2>Submit Feedback</h2>
          <form method="POST">
            <textarea name="feedback" placeholder="Type a review here (e.g. 'The app is too slow')..." required></textarea>
            <button type="submit">Analyze</button>
          </form>
        </div>
        <div class="card">
          <h2>Sentiment Ratio</h2>
          <canvas id="sentimentChart"></canvas>
        </div>
      </div>
      <div class="card">
        <h2>Recent Analysis</h2>
        <div class="table-container">
          <table>
            <thead>
              <tr><th width="45%">Feedback</th><th>Sentiment</th><th>AI Summary</th></tr>
            </thead>
            <tbody>
{rows}
            </tbody>
          </table>
        </div>
      </div>
    </div>
  </div>
{_render_chart(counts)}
</body>
</html>
"""
