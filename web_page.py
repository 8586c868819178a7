#!/usr/bin/env python3
"""Single-page form served by the interactive runner."""

INDEX_HTML = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Organization label sync</title>
<style>
  body { font-family: system-ui, sans-serif; max-width: 720px; margin: 2rem auto; color: #222; }
  section { border: 1px solid #ddd; border-radius: 6px; padding: 1rem; margin-bottom: 1rem; }
  label { display: block; margin-bottom: .5rem; }
  input[type=text], input[type=password] { width: 100%; box-sizing: border-box; padding: .4rem; }
  ul { list-style: none; padding: 0; margin: 0; }
  #labels li { display: flex; align-items: center; gap: .5rem; padding: .25rem 0; }
  .swatch { width: 50px; height: 20px; border-radius: 4px; display: inline-block; }
  #log { max-height: 400px; overflow: auto; font-size: .9rem; }
  #log time { color: #888; margin-right: .5rem; }
  .info { color: #222; } .success { color: #2e7d32; } .progress { color: #0277bd; } .error { color: #c62828; }
</style>
</head>
<body>
<h1>Organization label sync</h1>

<section>
  <label>GitHub token <input id="token" type="password" autocomplete="off"></label>
  <label>Organization <input id="org" type="text"></label>
  <label><input id="dry-run" type="checkbox"> Dry run</label>
</section>

<p id="status"></p>

<section>
  <h2>Labels</h2>
  <ul id="labels"></ul>
  <form id="add-label">
    <input id="new-name" type="text" placeholder="Label name">
    <input id="new-color" type="text" placeholder="#RRGGBB">
    <button type="submit">Add label</button>
  </form>
</section>

<button id="run">Start</button>

<section id="log-panel" hidden>
  <h2>Log</h2>
  <ul id="log"></ul>
</section>

<script>
let labels = [];
const logList = document.getElementById("log");
const runButton = document.getElementById("run");
const statusLine = document.getElementById("status");

function addLog(message, severity = "info", timestamp = new Date()) {
  document.getElementById("log-panel").hidden = false;
  const li = document.createElement("li");
  li.className = severity;
  const time = document.createElement("time");
  time.textContent = new Date(timestamp).toLocaleTimeString();
  li.append(time, document.createTextNode(message));
  logList.append(li);
  logList.scrollTop = logList.scrollHeight;
}

function renderLabels() {
  const list = document.getElementById("labels");
  list.replaceChildren();
  labels.forEach((label, index) => {
    const li = document.createElement("li");
    const swatch = document.createElement("span");
    swatch.className = "swatch";
    swatch.style.backgroundColor = "#" + label.color;
    const remove = document.createElement("button");
    remove.textContent = "Remove";
    remove.onclick = () => {
      const [removed] = labels.splice(index, 1);
      renderLabels();
      addLog("removed label: " + removed.name);
    };
    li.append(document.createTextNode(label.name), swatch, remove);
    list.append(li);
  });
}

document.getElementById("add-label").onsubmit = (event) => {
  event.preventDefault();
  const name = document.getElementById("new-name").value.trim();
  const color = document.getElementById("new-color").value.trim().replace("#", "");
  if (!name || !color) return;
  labels.push({ name, color });
  renderLabels();
  addLog("added label: " + name, "success");
  event.target.reset();
};

runButton.onclick = async () => {
  const token = document.getElementById("token").value;
  const org = document.getElementById("org").value;
  if (!token || !org) {
    statusLine.textContent = "Enter a GitHub token and organization name";
    addLog("error: missing GitHub token or organization name", "error");
    return;
  }
  runButton.disabled = true;
  runButton.textContent = "Running...";
  statusLine.textContent = "Running...";
  logList.replaceChildren();
  try {
    const response = await fetch("/api/sync", {
      method: "POST",
      headers: { "Content-Type": "application/json" },
      body: JSON.stringify({
        token, org, labels,
        dry_run: document.getElementById("dry-run").checked,
      }),
    });
    if (!response.ok) {
      const detail = await response.text();
      throw new Error("request rejected (" + response.status + "): " + detail);
    }
    const reader = response.body.getReader();
    const decoder = new TextDecoder();
    let buffer = "";
    for (;;) {
      const { value, done } = await reader.read();
      if (done) break;
      buffer += decoder.decode(value, { stream: true });
      const lines = buffer.split("\\n");
      buffer = lines.pop();
      for (const line of lines.filter(Boolean)) {
        const entry = JSON.parse(line);
        addLog(entry.message, entry.severity, entry.timestamp);
        if (entry.severity === "error" || entry.message.startsWith("done:")) {
          statusLine.textContent = entry.message;
        }
      }
    }
  } catch (error) {
    statusLine.textContent = "error: " + error.message;
    addLog("error: " + error.message, "error");
  } finally {
    runButton.disabled = false;
    runButton.textContent = "Start";
  }
};

fetch("/api/labels/default")
  .then((response) => response.json())
  .then((defaults) => { labels = defaults; renderLabels(); });
</script>
</body>
</html>
"""
