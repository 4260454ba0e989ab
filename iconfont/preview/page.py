"""Static preview page: a searchable grid of every icon class.

Pure templating over the sorted icon names; nothing here touches the font.
"""

from __future__ import annotations

import html
import os
from pathlib import Path

from iconfont.models.font import FontCompilerConfig

PREVIEW_CSS = """:root {
    --color-primary: #0073aa;
    --color-text: #1e1e1e;
    --color-text-secondary: #666;
    --color-border: #e0e0e0;
    --color-border-hover: #ddd;
    --color-bg: #f5f5f5;
    --color-bg-container: #ffffff;
    --color-download: #10b981;

    --spacing-xs: 8px;
    --spacing-sm: 12px;
    --spacing-md: 20px;
    --spacing-lg: 30px;
    --spacing-xl: 40px;
    --spacing-2xl: 60px;

    --radius-sm: 6px;
    --radius-md: 8px;

    --font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
    --font-size-sm: 12px;
    --font-size-base: 14px;
    --font-size-md: 16px;
    --font-size-lg: 32px;

    --shadow-sm: 0 2px 8px rgba(0, 0, 0, 0.1);
    --shadow-md: 0 4px 12px rgba(0, 0, 0, 0.2);

    --transition: all 0.2s ease;
    --transition-slide: 0.3s ease;
}

* {
    margin: 0;
    padding: 0;
    box-sizing: border-box;
}

body {
    font-family: var(--font-family);
    background: var(--color-bg);
    padding: var(--spacing-xl) var(--spacing-md);
}

.container {
    max-width: 1400px;
    margin: 0 auto;
    background: var(--color-bg-container);
    padding: var(--spacing-xl);
    border-radius: var(--radius-md);
    box-shadow: var(--shadow-sm);
}

.header {
    display: flex;
    justify-content: space-between;
    align-items: center;
    margin-bottom: var(--spacing-lg);
    flex-wrap: wrap;
    gap: var(--spacing-md);
}

h1 {
    color: var(--color-text);
    margin-bottom: 10px;
    font-size: var(--font-size-lg);
}

.stats {
    color: var(--color-text-secondary);
    font-size: var(--font-size-base);
}

.btn {
    display: inline-flex;
    align-items: center;
    gap: var(--spacing-xs);
    padding: 10px var(--spacing-md);
    border-radius: var(--radius-sm);
    text-decoration: none;
    font-size: var(--font-size-base);
    font-weight: 500;
    transition: var(--transition);
}

.btn-download {
    background: var(--color-download);
    color: white;
}

.btn-download:hover {
    transform: translateY(-2px);
    box-shadow: 0 4px 12px rgba(16, 185, 129, 0.3);
}

.search {
    width: 100%;
    padding: var(--spacing-sm) var(--spacing-md);
    font-size: var(--font-size-md);
    border: 2px solid var(--color-border-hover);
    border-radius: var(--radius-sm);
    margin-bottom: var(--spacing-lg);
    outline: none;
}

.search:focus {
    border-color: var(--color-primary);
}

.grid {
    display: grid;
    grid-template-columns: repeat(auto-fill, minmax(180px, 1fr));
    gap: var(--spacing-md);
}

.icon-item {
    display: flex;
    flex-direction: column;
    align-items: center;
    padding: var(--spacing-md);
    border: 1px solid var(--color-border);
    border-radius: var(--radius-sm);
    transition: var(--transition);
    cursor: pointer;
}

.icon-item:hover {
    border-color: var(--color-primary);
    box-shadow: 0 2px 8px rgba(0, 115, 170, 0.1);
    transform: translateY(-2px);
}

.icon-item i {
    font-size: 32px;
    color: var(--color-text);
    margin-bottom: var(--spacing-sm);
}

.icon-name {
    font-size: var(--font-size-sm);
    color: var(--color-text-secondary);
    text-align: center;
    word-break: break-all;
}

.copied {
    position: fixed;
    top: var(--spacing-md);
    right: var(--spacing-md);
    background: var(--color-primary);
    color: white;
    padding: var(--spacing-sm) 24px;
    border-radius: var(--radius-sm);
    box-shadow: var(--shadow-md);
    animation: slideIn var(--transition-slide), slideOut var(--transition-slide) 2.7s;
}

@keyframes slideIn {
    from { transform: translateX(400px); opacity: 0; }
    to { transform: translateX(0); opacity: 1; }
}

@keyframes slideOut {
    from { transform: translateX(0); opacity: 1; }
    to { transform: translateX(400px); opacity: 0; }
}

.footer {
    margin-top: var(--spacing-2xl);
    padding-top: var(--spacing-lg);
    border-top: 1px solid var(--color-border);
    text-align: center;
    color: var(--color-text-secondary);
    font-size: var(--font-size-base);
}
"""

_SCRIPT = """    <script>
        const searchInput = document.getElementById('searchInput');
        const iconItems = document.querySelectorAll('#iconGrid .icon-item');

        searchInput.addEventListener('input', (e) => {
            const term = e.target.value.toLowerCase();
            iconItems.forEach(item => {
                const name = item.dataset.name.toLowerCase();
                item.style.display = name.includes(term) ? 'flex' : 'none';
            });
        });

        function copyIconClass(className) {
            navigator.clipboard.writeText(className).then(() => {
                const note = document.createElement('div');
                note.className = 'copied';
                note.textContent = `Copied: ${className}`;
                document.body.appendChild(note);
                setTimeout(() => note.remove(), 3000);
            });
        }
    </script>"""


def render_icon_item(name: str, prefix: str) -> str:
    cls = html.escape(f"{prefix}-{name}")
    return (
        f'            <div class="icon-item" data-name="{html.escape(name)}"'
        f" onclick=\"copyIconClass('{cls}')\">\n"
        f'                <i class="{html.escape(prefix)} {cls}"></i>\n'
        f'                <div class="icon-name">{cls}</div>\n'
        f"            </div>"
    )


def render_preview(names: list[str], config: FontCompilerConfig, assets_href: str = "dist") -> str:
    """Preview HTML for the given icon names (rendered sorted)."""
    names = sorted(names)
    title = html.escape(config.name)
    href = html.escape(assets_href.rstrip("/"))
    items = "\n".join(render_icon_item(name, config.prefix) for name in names)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title} Preview</title>
    <link rel="stylesheet" href="{href}/{title}.css">
    <link rel="stylesheet" href="preview.css">
</head>
<body>
    <div class="container">
        <div class="header">
            <div class="header-left">
                <h1>{title}</h1>
                <div class="stats">{len(names)} icons available</div>
            </div>
            <a href="{href}/" class="btn btn-download">Download Fonts</a>
        </div>
        <input type="text" class="search" placeholder="Search icons..." id="searchInput">
        <div class="grid" id="iconGrid">
{items}
        </div>
        <div class="footer">Generated by iconfont</div>
    </div>

{_SCRIPT}
</body>
</html>
"""


def write_preview(root: Path, names: list[str], config: FontCompilerConfig) -> list[Path]:
    """Write index.html and preview.css into root."""
    root.mkdir(parents=True, exist_ok=True)
    assets_href = Path(os.path.relpath(config.output_dir, root)).as_posix()

    html_path = root / "index.html"
    css_path = root / "preview.css"
    html_path.write_text(render_preview(names, config, assets_href), encoding="utf-8")
    css_path.write_text(PREVIEW_CSS, encoding="utf-8")
    return [html_path, css_path]
