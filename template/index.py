index = """
<!doctype html>
<html>
  <head>
    <meta charset="utf-8" />
    <title>Audio Transcription</title>
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <style>
      body { font-family: system-ui, -apple-system, Segoe UI, Roboto, sans-serif; margin: 32px auto; max-width: 820px; padding: 0 16px; }
      h1 { margin: 0 0 16px; }
      .row { margin: 12px 0; }
      .hidden { display: none; }
      button { padding: 8px 14px; border-radius: 8px; border: 1px solid #e5e7eb; background: #fff; cursor: pointer; }
      button:disabled { opacity: .5; cursor: default; }
      .error { color: #b91c1c; }
      .notice { background: #eff6ff; border-radius: 8px; padding: 8px 12px; }
      .bar { height: 10px; background: #e5e7eb; border-radius: 5px; overflow: hidden; }
      .bar > div { height: 100%; width: 0; background: #2563eb; transition: width .3s; }
      .tabs button.active { background: #2563eb; color: #fff; }
      .panel { white-space: pre-wrap; background: #fafafa; padding: 12px; border-radius: 8px; min-height: 48px; }
      .segment { margin: 6px 0; }
      .segment strong { display: inline-block; min-width: 90px; }
    </style>
  </head>
  <body>
    <h1>Audio Transcription</h1>

    <section id="upload">
      <div class="row">
        <input type="file" id="file" accept="audio/mpeg,audio/wav,audio/mp4,audio/x-m4a" />
        <span id="fileInfo"></span>
      </div>
      <div class="row"><button id="startBtn" disabled>Transcribe</button></div>
      <div class="row error" id="uploadError"></div>
    </section>

    <section id="progress" class="hidden">
      <div class="row" id="stage">Validating file...</div>
      <div class="row bar"><div id="barFill"></div></div>
    </section>

    <section id="results" class="hidden">
      <div class="row notice hidden" id="compressed">Your audio file was automatically compressed for processing.</div>
      <div class="row tabs">
        <button data-tab="transcript" class="active">Transcript</button>
        <button data-tab="summary">Summary</button>
        <button data-tab="speakers">Speakers</button>
      </div>

      <div id="tab-transcript">
        <div class="row"><button id="copyBtn">Copy</button> <button id="downloadBtn">Download</button> <button id="resetBtn">New file</button></div>
        <div class="panel" id="transcript"></div>
      </div>
      <div id="tab-summary" class="hidden">
        <div class="row"><button id="summaryBtn">Generate summary</button></div>
        <div class="panel" id="summary">-</div>
      </div>
      <div id="tab-speakers" class="hidden">
        <div class="row"><button id="speakersBtn">Identify speakers</button></div>
        <div class="panel" id="speakers">-</div>
      </div>
    </section>

    <script>
      const ALLOWED = ["audio/mpeg", "audio/wav", "audio/mp4", "audio/x-m4a"];
      const MAX_SIZE = 100 * 1024 * 1024;
      const $ = (id) => document.getElementById(id);
      let selected = null, transcriptText = "", fileName = "transcript";

      function formatFileSize(bytes) {
        if (bytes === 0) return "0 B";
        const units = ["B", "KB", "MB", "GB"];
        let size = bytes, i = 0;
        while (size >= 1024 && i < units.length - 1) { size /= 1024; i++; }
        return size.toFixed(1) + " " + units[i];
      }

      function validate(file) {
        if (!ALLOWED.includes(file.type)) return "Invalid file type. Please upload an MP3, WAV, or M4A file.";
        if (file.size > MAX_SIZE) return "File size exceeds the " + formatFileSize(MAX_SIZE) + " limit.";
        return null;
      }

      function show(section) {
        for (const id of ["upload", "progress", "results"]) $(id).classList.toggle("hidden", id !== section);
      }

      function escapeHtml(s) {
        return String(s).replace(/[&<>"]/g, (c) => ({"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;"}[c]));
      }

      async function postJson(url, body) {
        const res = await fetch(url, { method: "POST", headers: { "Content-Type": "application/json" }, body: JSON.stringify(body) });
        const data = await res.json();
        if (!res.ok) throw new Error(data.detail || "Request failed");
        return data;
      }

      $("file").addEventListener("change", (e) => {
        selected = e.target.files[0] || null;
        $("uploadError").textContent = "";
        $("fileInfo").textContent = selected ? selected.name + " (" + formatFileSize(selected.size) + ")" : "";
        $("startBtn").disabled = !selected;
      });

      $("startBtn").addEventListener("click", async () => {
        show("progress");
        $("stage").textContent = "Validating file...";
        const problem = validate(selected);
        if (problem) { $("uploadError").textContent = problem; show("upload"); return; }

        // Simulated progress; the server does not report real progress.
        $("stage").textContent = "Transcribing...";
        let progress = 0;
        $("barFill").style.width = "0%";
        const timer = setInterval(() => {
          progress = Math.min(90, progress + ((100 - progress) / 10) * Math.random());
          $("barFill").style.width = progress + "%";
        }, 300);

        const form = new FormData();
        form.append("file", selected);
        try {
          const res = await fetch("/api/transcribe", { method: "POST", body: form });
          const data = await res.json();
          if (!res.ok) throw new Error(data.detail || "Failed to transcribe audio");
          $("barFill").style.width = "100%";
          transcriptText = data.text;
          fileName = (data.filename || "transcript").replace(/\\.[^.]+$/, "");
          $("transcript").textContent = data.text;
          $("compressed").classList.toggle("hidden", !data.wasCompressed);
          $("summary").textContent = "-";
          $("speakers").textContent = "-";
          show("results");
        } catch (err) {
          $("uploadError").textContent = err.message;
          show("upload");
        } finally {
          clearInterval(timer);
        }
      });

      document.querySelectorAll(".tabs button").forEach((btn) => btn.addEventListener("click", () => {
        document.querySelectorAll(".tabs button").forEach((b) => b.classList.toggle("active", b === btn));
        for (const tab of ["transcript", "summary", "speakers"]) $("tab-" + tab).classList.toggle("hidden", tab !== btn.dataset.tab);
      }));

      $("summaryBtn").addEventListener("click", async () => {
        $("summaryBtn").disabled = true;
        $("summary").textContent = "Generating summary...";
        try {
          const s = await postJson("/api/summarize", { text: transcriptText });
          let html = "<strong>Key points</strong><ul>" + s.keyPoints.map((p) => "<li>" + escapeHtml(p) + "</li>").join("") + "</ul>";
          html += "<strong>Topics</strong><ul>" + s.topics.map((t) => "<li><b>" + escapeHtml(t.topic) + "</b>: " + escapeHtml(t.description) + "</li>").join("") + "</ul>";
          if (s.actionItems.length) html += "<strong>Action items</strong><ul>" + s.actionItems.map((a) => "<li>" + escapeHtml(a) + "</li>").join("") + "</ul>";
          $("summary").innerHTML = html;
        } catch (err) {
          $("summary").innerHTML = '<span class="error">' + escapeHtml(err.message) + "</span>";
        } finally {
          $("summaryBtn").disabled = false;
        }
      });

      $("speakersBtn").addEventListener("click", async () => {
        $("speakersBtn").disabled = true;
        $("speakers").textContent = "Identifying speakers...";
        try {
          const segments = await postJson("/api/identify-speakers", { text: transcriptText });
          $("speakers").innerHTML = segments.map((s) => '<div class="segment"><strong>' + escapeHtml(s.speaker) + ":</strong> " + escapeHtml(s.text) + "</div>").join("");
        } catch (err) {
          $("speakers").innerHTML = '<span class="error">' + escapeHtml(err.message) + "</span>";
        } finally {
          $("speakersBtn").disabled = false;
        }
      });

      $("copyBtn").addEventListener("click", () => navigator.clipboard.writeText(transcriptText));

      $("downloadBtn").addEventListener("click", () => {
        const url = URL.createObjectURL(new Blob([transcriptText], { type: "text/plain" }));
        const a = document.createElement("a");
        a.href = url;
        a.download = fileName + ".txt";
        a.click();
        URL.revokeObjectURL(url);
      });

      $("resetBtn").addEventListener("click", () => {
        selected = null;
        transcriptText = "";
        $("file").value = "";
        $("fileInfo").textContent = "";
        $("startBtn").disabled = true;
        show("upload");
      });
    </script>
  </body>
</html>
"""
