"""Server-rendered HTML pages.

Every page goes through ``render_template``, which escapes all dynamic
values. Markup fragments that must not be escaped are restricted to the
constants defined in this module.
"""

from datetime import date
from string import Template
from typing import Mapping, Optional

from goal_tracker.models import MAX_GOAL_LENGTH
from goal_tracker.sanitizer import escape_html

INVALID_GOAL_FLAG = "invalid_goal"
ALERT_DISMISS_MS = 5000

_DOCUMENT = Template("""<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>$title</title>
    <link rel="stylesheet" href="/styles.css">
$head  </head>
  <body>
$body
  </body>
</html>
""")

_HOME_HEAD = """    <link rel="preconnect" href="https://fonts.googleapis.com">
    <link rel="stylesheet" href="https://cdnjs.cloudflare.com/ajax/libs/font-awesome/6.4.0/css/all.min.css">
"""

_SUCCESS_BANNER = '<div class="alert alert-success">Goal updated successfully!</div>'
_ERROR_BANNER = (
    '<div class="alert alert-error">'
    f"Please enter a valid goal (1-{MAX_GOAL_LENGTH} characters)"
    "</div>"
)

_HOME_BODY = Template("""    <main class="container">
      $success_banner
      $error_banner

      <section class="goal-section">
        <h1><i class="fas fa-bullseye"></i> My Course Goal!!!</h1>
        <div class="goal-display">
          <h2 id="current-goal">$goal</h2>
          <small>Last updated: $updated</small>
        </div>
      </section>

      <section class="form-section">
        <form action="/store-goal" method="POST" class="goal-form">
          <div class="form-group">
            <label for="goal">
              <i class="fas fa-edit"></i> New Course Goal
            </label>
            <input
              type="text"
              id="goal"
              name="goal"
              value="$goal"
              placeholder="Enter your learning goal..."
              required
              maxlength="$max_length"
            >
            <div class="char-count" id="charCount">$length/$max_length</div>
          </div>
          <button type="submit" class="btn-primary">
            <i class="fas fa-save"></i> Update Goal
          </button>
        </form>
      </section>

      <footer>
        <p>Track your learning progress!</p>
      </footer>
    </main>

    <script>
      document.getElementById('goal').addEventListener('input', (e) => {
        document.getElementById('charCount').textContent = e.target.value.length + '/$max_length';
      });

      setTimeout(() => {
        document.querySelectorAll('.alert').forEach(alert => {
          alert.style.transition = 'opacity 0.5s';
          alert.style.opacity = '0';
          setTimeout(() => alert.remove(), 500);
        });
      }, $dismiss_ms);
    </script>""")

_NOT_FOUND_BODY = """    <div class="container" style="text-align: center; padding: 50px;">
      <h1>404 - Page Not Found</h1>
      <p>The page you're looking for doesn't exist.</p>
      <a href="/" class="btn-primary">Go Home</a>
    </div>"""

_SERVER_ERROR_BODY = Template("""    <div class="container" style="text-align: center; padding: 50px;">
      <h1>500 - Server Error</h1>
      <p>Something went wrong on our end.</p>
      $detail
      <a href="/" class="btn-primary">Go Home</a>
    </div>""")

_STACK_TRACE = Template("<pre>$stack</pre>")


def render_template(
    template: Template,
    *,
    fragments: Optional[Mapping[str, str]] = None,
    **values: object,
) -> str:
    """Fill ``template``, escaping every keyword value.

    ``fragments`` is inserted verbatim and must only hold markup built from
    this module's constants or from earlier ``render_template`` calls.
    """
    context = {key: escape_html(str(value)) for key, value in values.items()}
    if fragments:
        context.update(fragments)
    return template.substitute(context)


def _document(title: str, body: str, head: str = "") -> str:
    return render_template(_DOCUMENT, title=title, fragments={"head": head, "body": body})


def utf16_length(text: str) -> int:
    """Length as the browser counts it (UTF-16 code units), matching the client counter."""
    return len(text.encode("utf-16-le", errors="surrogatepass")) // 2


def format_updated(day: date) -> str:
    """Short month/day/year date, e.g. 10/18/2026"""
    return f"{day.month}/{day.day}/{day.year}"


def render_home(
    goal_text: str,
    success: Optional[str] = None,
    error: Optional[str] = None,
    today: Optional[date] = None,
) -> str:
    """Render the home page.

    Args:
        goal_text: Current goal, escaped before interpolation
        success: Any non-empty value shows the success banner
        error: Only ``invalid_goal`` shows the validation banner; other
            values are ignored
        today: Date shown as "Last updated" (defaults to today)
    """
    body = render_template(
        _HOME_BODY,
        fragments={
            "success_banner": _SUCCESS_BANNER if success else "",
            "error_banner": _ERROR_BANNER if error == INVALID_GOAL_FLAG else "",
        },
        goal=goal_text,
        updated=format_updated(today or date.today()),
        length=utf16_length(goal_text),
        max_length=MAX_GOAL_LENGTH,
        dismiss_ms=ALERT_DISMISS_MS,
    )
    return _document("Course Goal Tracker", body, head=_HOME_HEAD)


def render_not_found() -> str:
    return _document("Page Not Found", _NOT_FOUND_BODY)


def render_server_error(error_detail: str, include_stack_trace: bool) -> str:
    """Render the 500 page; ``error_detail`` is only shown when requested."""
    detail = render_template(_STACK_TRACE, stack=error_detail) if include_stack_trace else ""
    body = render_template(_SERVER_ERROR_BODY, fragments={"detail": detail})
    return _document("Server Error", body)
