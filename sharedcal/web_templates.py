"""Jinja markup for the month page."""

MONTH_PAGE = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{{ config.calendar_name }} - {{ view_date.strftime('%B %Y') }}</title>
  <style>
    body { font-family: system-ui, sans-serif; max-width: 64rem; margin: 0 auto; padding: 1rem; }
    header { display: flex; justify-content: space-between; align-items: center; }
    nav a, nav button { margin-left: .25rem; }
    .grid { display: grid; grid-template-columns: repeat(7, 1fr); gap: 4px; }
    .label { text-align: center; font-weight: 600; padding: .5rem 0; }
    .cell { border: 1px solid #ddd; border-radius: 4px; padding: .4rem; min-height: 90px; font-size: .8rem; }
    .cell.out { background: #f7f7f7; color: #999; }
    .cell.today { outline: 2px solid #a5b4fc; }
    .event { background: #eef2ff; border-radius: 3px; padding: 2px 4px; margin-top: 2px; }
    .event time { color: #555; font-size: .7rem; }
    .more { color: #777; font-size: .7rem; }
    footer input { width: 100%; }
  </style>
</head>
<body>
  <header>
    <div>
      <h1>{{ config.calendar_name }}</h1>
      <p>{{ view_date.strftime('%B %Y') }}</p>
    </div>
    <nav>
      <a href="{{ url_for('index', month=prev_month) }}">&#9664;</a>
      <a href="{{ url_for('index') }}">Today</a>
      <a href="{{ url_for('index', month=next_month) }}">&#9654;</a>
      <a href="{{ url_for('export_ics') }}">Export .ics</a>
    </nav>
  </header>

  <div class="grid">
    {% for label in weekday_labels %}<div class="label">{{ label }}</div>{% endfor %}
    {% for cell in cells %}
    <div class="cell{% if not cell.in_month %} out{% endif %}{% if cell.is_today %} today{% endif %}">
      <div>{{ cell.day.day }}</div>
      {% for event in cell.visible_events %}
      <div class="event" title="{{ event.description }}">
        <strong>{{ event.title }}</strong><br>
        <time>{{ local_time(event) }}</time>
        <form method="post" action="{{ url_for('delete_event_form', event_id=event.id) }}"
              onsubmit="return confirm('Delete event?')" style="display:inline">
          <input type="hidden" name="confirm" value="true">
          <input type="hidden" name="month" value="{{ month }}">
          <button type="submit">&times;</button>
        </form>
        <a href="{{ url_for('invite_redirect', event_id=event.id) }}">invite</a>
      </div>
      {% endfor %}
      {% if cell.overflow %}<div class="more">+{{ cell.overflow }} more</div>{% endif %}
    </div>
    {% endfor %}
  </div>

  <section>
    <h2>New event</h2>
    <form method="post" action="{{ url_for('create_event_form') }}">
      <input name="title" placeholder="Title" required>
      <input type="date" name="date" value="{{ default_date }}" required>
      <input type="time" name="time" value="{{ config.default_time }}" required>
      <input type="number" name="duration" min="1" value="{{ config.default_duration }}">
      <input name="attendees" placeholder="ana@example.com, peter@example.com">
      <textarea name="description" rows="2" placeholder="Description"></textarea>
      <input type="hidden" name="month" value="{{ month }}">
      <button type="submit">Save</button>
    </form>
  </section>

  <footer>
    <p>Share link (the whole calendar is encoded in the link):</p>
    <input readonly value="{{ share_link }}" onclick="this.select()">
  </footer>
</body>
</html>
"""
