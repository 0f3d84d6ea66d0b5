"""
Design tokens for the todo page (light slate, shadcn-inspired).

Pages use these constants instead of long inline class strings.
"""

C_FONT_STACK = '"Inter", system-ui, -apple-system, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif'

APP_HEAD_HTML = f"""
<style>
  :root, body, .q-body {{
    font-family: {C_FONT_STACK};
    letter-spacing: -0.01em;
    color-scheme: light;
  }}
  body, .q-body, .nicegui-content {{
    background: #f8fafc !important;
    color: #0f172a !important;
  }}
  .q-card {{ box-shadow: none !important; }}
</style>
"""

C_CONTAINER = "w-full max-w-2xl mx-auto px-6 py-6 gap-6"
C_CARD = "bg-white border border-slate-200 shadow-sm rounded-xl"
C_PAGE_TITLE = "text-2xl font-bold tracking-tight text-slate-900"
C_INPUT = "w-full text-sm"

C_BTN_PRIM = (
    "bg-slate-900 text-white hover:bg-slate-800 active:scale-[0.99] rounded-lg px-4 py-2 text-sm "
    "font-semibold transition-all focus-visible:outline-none focus-visible:ring-2 focus-visible:ring-amber-400/40"
)
C_BTN_GHOST = "text-slate-500 hover:text-rose-600 rounded-md"

C_TASK_ROW = "w-full items-center justify-between border-b border-slate-100 py-2 gap-3"
C_TASK_TEXT = "text-sm text-slate-700"
C_TASK_TEXT_DONE = "text-sm text-slate-400 line-through"
C_TEXT_HINT = "text-sm text-slate-500"
