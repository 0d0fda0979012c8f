import os
import time
import html
import requests
import streamlit as st

# === Настройки ===
DEFAULT_API_URL = os.getenv("API_URL", "http://localhost:8000/api/RocketInfo")
APP_TITLE = "🚀 RocketInfo"
APP_DESC = "Задай вопрос о ближайших запусках ракет — ответит GPT-4o по данным RocketLaunch.Live."

# === Внешний вид ===
st.set_page_config(page_title=APP_TITLE, page_icon="🚀", layout="wide")
st.markdown(
    """
<style>
.block-container { padding-top: 2rem; padding-bottom: 1rem; }
.answer { border: 1px solid #e5e7eb; border-radius: 12px; padding: 14px; }
.divider { border-top: 1px solid #e5e7eb; margin: 8px 0 16px 0; }
</style>
""",
    unsafe_allow_html=True,
)

# === Сайдбар ===
with st.sidebar:
    st.markdown(f"### {APP_TITLE}")
    st.write(APP_DESC)
    api_url = st.text_input("API URL", value=DEFAULT_API_URL)
    st.markdown("---")
    st.markdown("- Запусти API: `uvicorn rocket_info.main:app --reload`")
    st.markdown("- Пустой вопрос — сервис сам расскажет о ближайших запусках.")
    clear_btn = st.button("Очистить историю")

# === Состояние ===
if "history" not in st.session_state:
    # элементы: (question, answer_html, latency_sec, ok)
    st.session_state.history = []

if clear_btn:
    st.session_state.history.clear()

st.title(APP_TITLE)

col_inp, col_btn = st.columns([4, 1])
with col_inp:
    user_q = st.text_input("Ваш вопрос:", placeholder="Например: When is the next launch?")
with col_btn:
    ask_clicked = st.button("Спросить", type="primary", use_container_width=True)


def call_api(question: str, url: str) -> dict:
    """GET /api/RocketInfo. Возвращает Question/Response либо ошибку."""
    t0 = time.time()
    try:
        r = requests.get(url, params={"question": question}, timeout=120)
    except requests.RequestException as e:
        return {"_ok": False, "_latency": time.time() - t0, "error": str(e)}
    latency = time.time() - t0
    try:
        data = r.json()
    except ValueError:
        return {"_ok": False, "_latency": latency, "error": f"HTTP {r.status_code}: {r.text}"}
    if r.status_code == 200:
        data["_ok"] = True
        data["_latency"] = latency
        return data
    # 500 от сервиса: {"Error": ..., "Details": ...}
    err = f"{data.get('Error', 'HTTP ' + str(r.status_code))}: {data.get('Details', '')}"
    return {"_ok": False, "_latency": latency, "error": err}


def as_html_with_br(text: str) -> str:
    return html.escape(text).replace("\n", "<br/>")


if ask_clicked:
    resp = call_api(user_q, api_url)
    if resp.get("_ok"):
        st.session_state.history.append(
            (resp.get("Question", user_q), as_html_with_br(resp.get("Response", "")), resp["_latency"], True)
        )
    else:
        st.session_state.history.append((user_q, resp.get("error", "unknown"), resp["_latency"], False))

# === История (последние сверху) ===
for q, a, lat, ok in reversed(st.session_state.history):
    with st.container():
        st.markdown(f"**❓ Вопрос:** {html.escape(q)}")
        if ok:
            st.markdown(f"""<div class="answer"><b>✅ Ответ:</b><br/>{a}</div>""", unsafe_allow_html=True)
        else:
            st.error(a)
        st.caption(f"⏱ {lat:.2f} c • API: {api_url}")
        st.markdown("<div class='divider'></div>", unsafe_allow_html=True)
