"""Static stylesheet and script blocks backing the generated cards and modals."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

STYLES_FILENAME = "showcase.css"
SCRIPT_FILENAME = "showcase.js"

MODAL_STYLE = dedent(
    """
    /* Project modal styles - generated by showcase */
    .project-modal {
      display: none;
      position: fixed;
      top: 0;
      left: 0;
      width: 100%;
      height: 100%;
      z-index: 10000;
      opacity: 0;
      transition: opacity 0.3s ease;
    }

    .project-modal.active {
      display: flex;
      align-items: center;
      justify-content: center;
      opacity: 1;
    }

    .modal-backdrop {
      position: absolute;
      inset: 0;
      background: rgba(0, 0, 0, 0.85);
      cursor: pointer;
    }

    .modal-container {
      position: relative;
      background: var(--bg-card, #fff);
      border-radius: 16px;
      max-width: 900px;
      max-height: 90vh;
      width: 90%;
      overflow-y: auto;
      box-shadow: 0 25px 50px -12px rgba(0, 0, 0, 0.5);
      animation: modalSlideIn 0.3s ease;
    }

    @keyframes modalSlideIn {
      from {
        transform: translateY(20px);
        opacity: 0;
      }
      to {
        transform: translateY(0);
        opacity: 1;
      }
    }

    .modal-close {
      position: absolute;
      top: 1rem;
      right: 1rem;
      width: 40px;
      height: 40px;
      border: none;
      background: var(--bg-surface, #f5f5f5);
      border-radius: 50%;
      cursor: pointer;
      z-index: 10;
      display: flex;
      align-items: center;
      justify-content: center;
      font-size: 1.25rem;
      color: var(--text-secondary, #666);
      transition: all 0.2s ease;
    }

    .modal-close:hover {
      background: var(--accent-kinetic, #2d5a4a);
      color: white;
    }

    .modal-gallery {
      position: relative;
      background: #000;
    }

    .gallery-main {
      position: relative;
      width: 100%;
      aspect-ratio: 16 / 9;
      overflow: hidden;
    }

    .gallery-item {
      display: none;
      width: 100%;
      height: 100%;
    }

    .gallery-item.active {
      display: flex;
      align-items: center;
      justify-content: center;
    }

    .gallery-item img,
    .gallery-item video {
      max-width: 100%;
      max-height: 100%;
      object-fit: contain;
    }

    .loop-video-container .loop-video {
      width: 100%;
      height: 100%;
      pointer-events: none;
    }

    .gallery-nav {
      position: absolute;
      top: 50%;
      transform: translateY(-50%);
      width: 50px;
      height: 50px;
      border: none;
      background: rgba(255, 255, 255, 0.9);
      border-radius: 50%;
      cursor: pointer;
      font-size: 1.25rem;
      color: #333;
      transition: all 0.2s ease;
    }

    .gallery-nav:hover {
      background: white;
      transform: translateY(-50%) scale(1.1);
    }

    .gallery-prev { left: 1rem; }
    .gallery-next { right: 1rem; }

    .gallery-thumbnails {
      display: flex;
      gap: 0.5rem;
      padding: 0.75rem;
      background: rgba(0, 0, 0, 0.8);
      overflow-x: auto;
      justify-content: center;
    }

    .gallery-thumb {
      width: 60px;
      height: 45px;
      border: 2px solid transparent;
      border-radius: 4px;
      overflow: hidden;
      cursor: pointer;
      padding: 0;
      background: rgba(255, 255, 255, 0.1);
      display: flex;
      align-items: center;
      justify-content: center;
      transition: all 0.2s ease;
    }

    .gallery-thumb.active {
      border-color: var(--accent-solar, #d4a574);
    }

    .gallery-thumb img {
      width: 100%;
      height: 100%;
      object-fit: cover;
    }

    .gallery-thumb i {
      font-size: 1.25rem;
      color: white;
    }

    .modal-content {
      padding: 2rem;
    }

    .modal-category {
      display: inline-block;
      padding: 0.25rem 0.75rem;
      background: var(--accent-kinetic, #2d5a4a);
      color: white;
      border-radius: 20px;
      font-size: 0.75rem;
      font-weight: 600;
      text-transform: uppercase;
      letter-spacing: 0.05em;
      margin-bottom: 0.75rem;
    }

    .modal-title {
      font-family: var(--font-head, serif);
      font-size: 2rem;
      color: var(--text-primary, #1a1a1a);
      margin-bottom: 1rem;
    }

    .modal-tech-stack {
      display: flex;
      flex-wrap: wrap;
      gap: 0.5rem;
      margin-bottom: 1.5rem;
    }

    .modal-tech-tag {
      padding: 0.25rem 0.75rem;
      background: var(--bg-surface, #f5f5f5);
      border-radius: 4px;
      font-size: 0.8rem;
      color: var(--text-secondary, #666);
    }

    .modal-description {
      color: var(--text-secondary, #4a4a4a);
      line-height: 1.7;
      margin-bottom: 2rem;
    }

    .modal-description h2,
    .modal-description h3,
    .modal-description h4 {
      color: var(--text-primary, #1a1a1a);
      margin-top: 1.5rem;
      margin-bottom: 0.75rem;
    }

    .modal-description h3 { font-size: 1.25rem; }
    .modal-description h4 { font-size: 1.1rem; }

    .modal-description ul {
      padding-left: 1.5rem;
      margin: 1rem 0;
    }

    .modal-description li {
      margin-bottom: 0.5rem;
    }

    .modal-description a {
      color: var(--accent-kinetic, #2d5a4a);
      text-decoration: underline;
    }

    .modal-links {
      display: flex;
      gap: 1rem;
      flex-wrap: wrap;
    }

    .modal-link {
      display: inline-flex;
      align-items: center;
      gap: 0.5rem;
      padding: 0.75rem 1.5rem;
      border-radius: 8px;
      font-weight: 600;
      text-decoration: none;
      transition: all 0.2s ease;
    }

    .modal-link.github {
      background: #24292e;
      color: white;
    }

    .modal-link.github:hover {
      background: #1b1f23;
    }

    .modal-link.live {
      background: var(--accent-kinetic, #2d5a4a);
      color: white;
    }

    .modal-link.live:hover {
      background: var(--accent-moss, #1e3d32);
    }

    /* Card overlay for click-to-view */
    .project-overlay {
      position: absolute;
      inset: 0;
      background: rgba(0, 0, 0, 0.6);
      display: flex;
      align-items: center;
      justify-content: center;
      opacity: 0;
      transition: opacity 0.3s ease;
    }

    .project-card:hover .project-overlay,
    .project-card:focus-within .project-overlay {
      opacity: 1;
    }

    .view-project-btn {
      padding: 0.75rem 1.5rem;
      background: white;
      color: #1a1a1a;
      border: none;
      border-radius: 8px;
      font-weight: 600;
      cursor: pointer;
      display: flex;
      align-items: center;
      gap: 0.5rem;
      transition: all 0.2s ease;
    }

    .view-project-btn:hover {
      background: var(--accent-solar, #d4a574);
      color: white;
      transform: scale(1.05);
    }

    .project-placeholder {
      width: 100%;
      height: 200px;
      background: linear-gradient(135deg, var(--bg-surface, #f5f5f5), var(--bg-card, #eee));
      display: flex;
      flex-direction: column;
      align-items: center;
      justify-content: center;
      gap: 0.75rem;
      color: var(--text-muted, #999);
    }

    .project-placeholder i {
      font-size: 2.5rem;
    }

    .project-placeholder span {
      font-size: 0.875rem;
    }

    @media (max-width: 768px) {
      .modal-container {
        width: 95%;
        max-height: 95vh;
        border-radius: 12px;
      }

      .modal-content {
        padding: 1.5rem;
      }

      .modal-title {
        font-size: 1.5rem;
      }

      .gallery-nav {
        width: 40px;
        height: 40px;
      }

      .modal-links {
        flex-direction: column;
      }

      .modal-link {
        justify-content: center;
      }
    }
    """
).strip()


MODAL_SCRIPT = dedent(
    """
    // Project modal behaviour - generated by showcase
    function openProjectModal(slug) {
      const modal = document.getElementById('modal-' + slug);
      if (!modal) return;

      document.body.style.overflow = 'hidden';
      modal.classList.add('active');
      modal.setAttribute('aria-hidden', 'false');

      const focusable = modal.querySelectorAll(
        'button, [href], input, select, textarea, [tabindex]:not([tabindex="-1"])'
      );
      if (focusable.length > 0) {
        focusable[0].focus();
      }

      initModalGallery(modal);
    }

    function closeProjectModal(slug) {
      const modal = document.getElementById('modal-' + slug);
      if (!modal) return;

      document.body.style.overflow = '';
      modal.classList.remove('active');
      modal.setAttribute('aria-hidden', 'true');
      modal.querySelectorAll('video:not(.loop-video)').forEach((video) => video.pause());
    }

    function initModalGallery(modal) {
      const gallery = modal.querySelector('.modal-gallery');
      if (!gallery || gallery.dataset.initialized === 'true') return;
      gallery.dataset.initialized = 'true';

      const items = gallery.querySelectorAll('.gallery-item');
      const thumbs = gallery.querySelectorAll('.gallery-thumb');
      const prevBtn = gallery.querySelector('.gallery-prev');
      const nextBtn = gallery.querySelector('.gallery-next');
      let currentIndex = 0;

      function showItem(index) {
        items.forEach((item, i) => {
          item.classList.toggle('active', i === index);
          const video = item.querySelector('video:not(.loop-video)');
          if (video && i !== index) video.pause();
        });
        thumbs.forEach((thumb, i) => {
          thumb.classList.toggle('active', i === index);
        });
        currentIndex = index;
      }

      if (prevBtn) {
        prevBtn.addEventListener('click', () => {
          showItem((currentIndex - 1 + items.length) % items.length);
        });
      }

      if (nextBtn) {
        nextBtn.addEventListener('click', () => {
          showItem((currentIndex + 1) % items.length);
        });
      }

      thumbs.forEach((thumb, index) => {
        thumb.addEventListener('click', () => showItem(index));
      });
    }

    document.addEventListener('keydown', (event) => {
      if (event.key !== 'Escape') return;
      const activeModal = document.querySelector('.project-modal.active');
      if (activeModal) {
        closeProjectModal(activeModal.id.replace(/^modal-/, ''));
      }
    });
    """
).strip()


def render_styles() -> str:
    """Return the stylesheet for cards, modals, and the gallery lightbox."""
    return MODAL_STYLE


def render_script() -> str:
    """Return the script that opens, closes, and navigates project modals."""
    return MODAL_SCRIPT


def write_static_assets(directory: Path) -> list[Path]:
    """Write the stylesheet and script into ``directory``."""
    directory.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for filename, content in ((STYLES_FILENAME, MODAL_STYLE), (SCRIPT_FILENAME, MODAL_SCRIPT)):
        target = directory / filename
        target.write_text(content + "\n", encoding="utf-8")
        written.append(target)
    return written
