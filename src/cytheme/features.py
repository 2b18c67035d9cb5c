"""JavaScript feature table: self-contained snippets gated by one flag each.

A feature contributes up to four pieces: a creation ``call`` placed in the
"Initializing UI Features" block of ``init()``, an inline ``code`` block
inside ``init()``, a ``helper`` function defined after ``init()``, and the
``css`` it needs in the stylesheet.
"""

import json
import re
from collections.abc import Callable
from dataclasses import dataclass

from cytheme.model import JavascriptConfig, ThemeConfig


@dataclass(frozen=True)
class Feature:
    flag: str
    label: str
    section: str = "javascript"  # ThemeConfig attribute holding the flag
    call: str = ""
    code: str | Callable[[JavascriptConfig], str] = ""
    helper: str = ""
    css: str = ""

    def enabled(self, theme: ThemeConfig) -> bool:
        return bool(getattr(getattr(theme, self.section), self.flag))

    def code_for(self, theme: ThemeConfig) -> str:
        if callable(self.code):
            return self.code(theme.javascript)
        return self.code


def split_image_urls(text: str) -> list[str]:
    """Split a comma or newline separated URL list, dropping blanks."""
    return [u.strip() for u in re.split(r"[\n,]+", text) if u.strip()]


# -- Helpers (defined after init) ---------------------------------------------

_CINEMATIC_HELPER = """\
  function createCinematicToggleButton() {
    const button = document.createElement('button');
    button.className = 'cinematic-toggle-btn';
    button.title = 'Toggle cinematic mode';
    button.textContent = '🎬';
    button.addEventListener('click', () => {
      document.body.classList.toggle('cinematic-mode');
    });
    document.body.appendChild(button);
  }
"""

_CINEMATIC_CSS = """\
/* Styles for Cinematic Mode Toggle Button */
.cinematic-toggle-btn {
    position: fixed;
    bottom: 20px;
    right: 20px;
    z-index: 9999;
    width: 50px;
    height: 50px;
    border-radius: 50%;
    border: 2px solid rgba(255, 255, 255, 0.5);
    background-color: rgba(0, 0, 0, 0.7);
    color: #fff;
    font-size: 24px;
    cursor: pointer;
    display: flex;
    align-items: center;
    justify-content: center;
    transition: background-color 0.3s ease, transform 0.3s ease;
}
.cinematic-toggle-btn:hover {
    transform: scale(1.1);
}
body.cinematic-mode .cinematic-toggle-btn {
    background-color: #4f46e5 !important;
    color: #fff !important;
}

/* Styles for Cinematic Mode Overlay */
body.cinematic-mode::after {
    content: '';
    position: fixed;
    top: 0;
    left: 0;
    width: 100%;
    height: 100%;
    background-color: rgba(0, 0, 0, 0.9);
    z-index: 9990; /* High, but below video/button */
    transition: background-color 0.5s ease;
    pointer-events: all;
}
body.cinematic-mode #videowrap {
    position: relative;
    z-index: 9995; /* Above the overlay */
}"""

_MOUSE_FOLLOWER_HELPER = """\
  function createMouseFollower() {
    const follower = document.createElement('div');
    follower.id = 'mouse-follower';
    document.body.appendChild(follower);
    window.addEventListener('mousemove', (e) => {
      follower.style.transform = 'translate(' + (e.clientX - 15) + 'px, ' + (e.clientY - 15) + 'px)';
    });
  }
"""

_MOUSE_FOLLOWER_CSS = """\
/* Styles for Mouse Follower */
#mouse-follower {
    position: fixed;
    top: 0;
    left: 0;
    width: 30px;
    height: 30px;
    border-radius: 50%;
    background-color: rgba(79, 70, 229, 0.5);
    border: 2px solid rgba(129, 140, 248, 0.5);
    z-index: 10000;
    pointer-events: none;
    transition: transform 0.1s ease-out, width 0.3s ease, height 0.3s ease;
    mix-blend-mode: screen;
}"""

_RANDOM_THEME_HELPER = """\
  function createRandomThemeButton() {
    const button = document.createElement('button');
    button.className = 'random-theme-btn';
    button.title = 'Randomize theme colors';
    button.textContent = '🎨';
    button.addEventListener('click', () => {
      const hue = Math.floor(Math.random() * 360);
      document.body.style.backgroundColor = 'hsl(' + hue + ', 40%, 12%)';
      document.querySelectorAll('.navbar').forEach((el) => {
        el.style.setProperty('background', 'hsla(' + hue + ', 45%, 20%, 0.85)', 'important');
      });
      document.querySelectorAll('#queue li.queue_active').forEach((el) => {
        el.style.setProperty('background-color', 'hsl(' + ((hue + 180) % 360) + ', 60%, 45%)', 'important');
      });
    });
    document.body.appendChild(button);
  }
"""

_RANDOM_THEME_CSS = """\
/* Styles for Random Theme Button */
.random-theme-btn {
    position: fixed;
    bottom: 80px;
    right: 20px;
    z-index: 9999;
    width: 50px;
    height: 50px;
    border-radius: 50%;
    border: 2px solid rgba(255, 255, 255, 0.5);
    background-color: rgba(0, 0, 0, 0.7);
    font-size: 22px;
    cursor: pointer;
}"""

_SHAKE_HELPER = """\
  function setupVideowrapShake() {
    const videowrap = document.getElementById('videowrap');
    if (!videowrap) return;
    function shake() {
      videowrap.classList.remove('shake-video');
      void videowrap.offsetWidth; // restart the animation
      videowrap.classList.add('shake-video');
      setTimeout(shake, 8000 + Math.random() * 22000);
    }
    setTimeout(shake, 5000 + Math.random() * 10000);
  }
"""

_SHAKE_CSS = """\
/* Styles for Videowrap Shake */
@keyframes videowrap-shake {
  0%, 100% { transform: translate(0, 0) rotate(0); }
  10% { transform: translate(-2px, -3px) rotate(-0.5deg); }
  20% { transform: translate(3px, 1px) rotate(0.5deg); }
  30% { transform: translate(-4px, 2px) rotate(-0.5deg); }
  40% { transform: translate(2px, -1px) rotate(0.5deg); }
  50% { transform: translate(-1px, 3px) rotate(-0.5deg); }
  60% { transform: translate(-3px, 1px) rotate(0.5deg); }
  70% { transform: translate(4px, 2px) rotate(-0.5deg); }
  80% { transform: translate(-1px, -2px) rotate(0.5deg); }
  90% { transform: translate(2px, 3px) rotate(0); }
}
.shake-video {
  animation: videowrap-shake 0.4s cubic-bezier(.36,.07,.19,.97) both;
}"""

_TILT_HELPER = """\
  function setupVideoFollowCursor() {
    const videowrap = document.getElementById('videowrap');
    if (!videowrap) return;
    videowrap.classList.add('video-tilt');
    window.addEventListener('mousemove', (e) => {
      const x = (e.clientX / window.innerWidth) - 0.5;
      const y = (e.clientY / window.innerHeight) - 0.5;
      videowrap.style.transform = 'perspective(1200px) rotateY(' + (x * 8) + 'deg) rotateX(' + (-y * 8) + 'deg)';
    });
    document.addEventListener('mouseleave', () => {
      videowrap.style.transform = '';
    });
  }
"""

_TILT_CSS = """\
/* Styles for 3D Video Player Tilt */
#videowrap.video-tilt {
    transition: transform 0.2s ease-out;
    transform-style: preserve-3d;
    will-change: transform;
}"""

# -- Inline blocks (inside init) ----------------------------------------------

_GLOWY_GRID = """
    // --- Feature: Interactive Glowy Grid ---
    // Creates a high-tech grid background that reacts to the user's mouse.
    (function setupGlowyGrid() {
      const canvas = document.createElement('canvas');
      canvas.id = 'glowy-grid-canvas';
      document.body.appendChild(canvas);
      const ctx = canvas.getContext('2d');

      Object.assign(canvas.style, {
        position: 'fixed',
        top: 0,
        left: 0,
        width: '100vw',
        height: '100vh',
        pointerEvents: 'none',
        zIndex: '-1',
        opacity: '0.7'
      });

      let width, height, mouse;
      const gridSize = 30;

      function resize() {
        width = canvas.width = window.innerWidth;
        height = canvas.height = window.innerHeight;
      }
      window.addEventListener('resize', resize);
      resize();

      mouse = { x: width / 2, y: height / 2 };
      window.addEventListener('mousemove', (e) => {
        mouse.x = e.clientX;
        mouse.y = e.clientY;
      });

      function draw() {
        ctx.clearRect(0, 0, width, height);

        for (let x = 0; x < width + gridSize; x += gridSize) {
          for (let y = 0; y < height + gridSize; y += gridSize) {
            const dist = Math.sqrt(Math.pow(mouse.x - x, 2) + Math.pow(mouse.y - y, 2));
            const opacity = Math.max(0, 0.5 - dist / 500);

            ctx.fillStyle = `rgba(167, 139, 250, ${opacity * 1.5})`;
            ctx.beginPath();
            ctx.arc(x, y, 1.5, 0, 2 * Math.PI);
            ctx.fill();

            ctx.strokeStyle = `rgba(139, 92, 246, ${opacity})`;
            if (x > 0) {
              ctx.beginPath();
              ctx.moveTo(x, y);
              ctx.lineTo(x - gridSize, y);
              ctx.stroke();
            }
            if (y > 0) {
              ctx.beginPath();
              ctx.moveTo(x, y);
              ctx.lineTo(x, y - gridSize);
              ctx.stroke();
            }
          }
        }
        requestAnimationFrame(draw);
      }
      draw();
    })();
"""

_MATRIX_RAIN = """
    // --- Feature: Matrix Rain ---
    // Creates a Matrix-style digital rain effect on a canvas background.
    (function setupMatrixRain() {
      const canvas = document.createElement('canvas');
      canvas.id = 'matrix-canvas';
      document.body.appendChild(canvas);
      const ctx = canvas.getContext('2d');

      Object.assign(canvas.style, {
        position: 'fixed',
        top: 0,
        left: 0,
        width: '100vw',
        height: '100vh',
        pointerEvents: 'none',
        zIndex: '-1',
        opacity: '0.6'
      });

      let width = canvas.width = window.innerWidth;
      let height = canvas.height = window.innerHeight;

      const characters = 'アァカサタナハマヤャラワガザダバパイィキシチニヒミリヰギジヂビピウゥクスツヌフムユュルグズブヅプエェケセテネヘメレヱゲゼデベペオォコソトノホモヨョロヲゴゾドボポヴッン0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ';
      const charactersArray = characters.split('');
      const fontSize = 14;
      const drops = Array.from({ length: Math.floor(width / fontSize) }).fill(1);

      function draw() {
        ctx.fillStyle = 'rgba(0, 0, 0, 0.05)';
        ctx.fillRect(0, 0, width, height);

        ctx.fillStyle = '#0F0';
        ctx.font = fontSize + 'px monospace';

        for (let i = 0; i < drops.length; i++) {
          const text = charactersArray[Math.floor(Math.random() * charactersArray.length)];
          ctx.fillText(text, i * fontSize, drops[i] * fontSize);

          if (drops[i] * fontSize > height && Math.random() > 0.975) {
            drops[i] = 0;
          }
          drops[i]++;
        }
      }

      setInterval(draw, 33);

      window.addEventListener('resize', () => {
        width = canvas.width = window.innerWidth;
        height = canvas.height = window.innerHeight;
        drops.length = 0;
        for (let i = 0; i < Math.floor(width / fontSize); i++) {
          drops.push(1);
        }
      });
    })();
"""

_FLOATING_IMAGES = """
    // --- Feature: Floating Images ---
    // Creates a canvas background with animated floating images.
    (function setupFloatingImages() {
      const imageUrls = __IMAGE_URLS__;
      if (imageUrls.length === 0) {
        console.log('Cytube Theme Script: No image URLs provided for floating images.');
        return;
      }

      const canvas = document.createElement('canvas');
      canvas.id = 'multi-image-canvas';
      document.body.appendChild(canvas);
      Object.assign(canvas.style, {
        position: 'fixed',
        top: 0,
        left: 0,
        width: '100vw',
        height: '100vh',
        pointerEvents: 'none',
        zIndex: '-1',
      });

      const ctx = canvas.getContext('2d');
      let width, height;
      const dpr = window.devicePixelRatio || 1;

      function resize() {
        width = canvas.width = window.innerWidth * dpr;
        height = canvas.height = window.innerHeight * dpr;
        canvas.style.width = window.innerWidth + 'px';
        canvas.style.height = window.innerHeight + 'px';
        ctx.setTransform(dpr, 0, 0, dpr, 0, 0);
      }
      window.addEventListener('resize', resize);
      resize();

      const images = [];
      let loadedCount = 0;

      function onSettled() {
        loadedCount++;
        if (loadedCount === imageUrls.length) {
          startAnimation();
        }
      }

      imageUrls.forEach((url, i) => {
        images[i] = new Image();
        images[i].crossOrigin = 'Anonymous';
        images[i].onload = onSettled;
        images[i].onerror = () => {
          console.error('Failed to load image:', url);
          onSettled();
        };
        images[i].src = url;
      });

      class AnimatedObj {
        constructor(img) {
          this.img = img;
          this.x = Math.random() * window.innerWidth;
          this.baseY = Math.random() * window.innerHeight;
          this.y = this.baseY;
          this.speedX = 0.3 + Math.random() * 0.5;
          this.width = 100;
          this.height = 100;
          if (img.naturalWidth && img.naturalHeight) {
            this.height = (img.naturalHeight / img.naturalWidth) * this.width;
          }
          this.animType = Math.floor(Math.random() * 3); // 0=linear, 1=sine wave, 2=zigzag
          this.amplitude = 30 + Math.random() * 40;
          this.frequency = 0.005 + Math.random() * 0.015;
          this.phase = Math.random() * 2 * Math.PI;
          this.zigzagDirection = 1;
        }

        update() {
          const viewWidth = window.innerWidth;
          const viewHeight = window.innerHeight;

          this.x += this.speedX;
          if (this.x > viewWidth + this.width) {
            this.x = -this.width;
            this.baseY = Math.random() * viewHeight;
          }
          switch (this.animType) {
            case 0:
              this.y = this.baseY;
              break;
            case 1:
              this.y = this.baseY + this.amplitude * Math.sin(this.frequency * this.x + this.phase);
              break;
            case 2:
              this.y += this.zigzagDirection * 1.5;
              if (this.y > this.baseY + this.amplitude || this.y < this.baseY - this.amplitude) {
                this.zigzagDirection *= -1;
              }
              break;
          }
          this.y = Math.max(0, Math.min(this.y, viewHeight - this.height));
        }

        draw() {
          ctx.drawImage(this.img, this.x, this.y, this.width, this.height);
        }
      }

      const animatedObjects = [];

      function startAnimation() {
        images.forEach((img) => {
          if (img.complete && img.naturalWidth > 0) {
            for (let i = 0; i < 4; i++) {
              animatedObjects.push(new AnimatedObj(img));
            }
          }
        });
        animate();
      }

      function animate() {
        ctx.clearRect(0, 0, width, height);
        animatedObjects.forEach((obj) => {
          obj.update();
          obj.draw();
        });
        requestAnimationFrame(animate);
      }
    })();
"""


def _floating_images(js: JavascriptConfig) -> str:
    urls = split_image_urls(js.floating_image_urls)
    return _FLOATING_IMAGES.replace("__IMAGE_URLS__", json.dumps(urls))


_SIMPSONS_GAME = """
    // --- Feature: Simpsons Arcade Game ---
    // Embeds the Simpsons arcade game in the corner of the screen.
    (function setupSimpsonsGame() {
      const gameContainer = document.createElement('div');
      gameContainer.id = 'simpsons-game-container';
      document.body.appendChild(gameContainer);

      Object.assign(gameContainer.style, {
        position: 'fixed',
        bottom: '20px',
        right: '20px',
        width: '600px',
        height: '450px',
        border: '2px solid #555',
        boxShadow: '0 4px 15px rgba(0,0,0,0.5)',
        backgroundColor: '#000',
        borderRadius: '10px',
        overflow: 'hidden',
        zIndex: '1000',
        display: 'block',
        transition: 'opacity 0.3s ease, transform 0.3s ease',
        transform: 'scale(1)',
        opacity: '1'
      });

      const gameIframe = document.createElement('iframe');
      gameIframe.src = 'https://www.retrogames.cc/embed/10442-the-simpsons-4-players-world-set-2.html';
      gameIframe.setAttribute('frameborder', 'no');
      gameIframe.setAttribute('allowfullscreen', 'true');
      gameIframe.setAttribute('scrolling', 'no');
      Object.assign(gameIframe.style, {
        width: '100%',
        height: '100%',
        border: 'none',
      });
      gameContainer.appendChild(gameIframe);

      const toggleButton = document.createElement('button');
      toggleButton.id = 'simpsons-game-toggle-button';
      toggleButton.textContent = 'Hide Game';
      document.body.appendChild(toggleButton);

      Object.assign(toggleButton.style, {
        position: 'fixed',
        bottom: '480px', // 450px height + 20px bottom + 10px gap
        right: '20px',
        zIndex: '1100',
        padding: '10px 20px',
        fontSize: '16px',
        cursor: 'pointer',
        borderRadius: '8px',
        border: '2px solid #555',
        backgroundColor: '#fdd835',
        color: '#000',
        boxShadow: '0 4px 10px rgba(0,0,0,0.4)',
        fontFamily: 'sans-serif'
      });

      toggleButton.onclick = function() {
        const isVisible = gameContainer.style.opacity === '1';
        if (isVisible) {
          gameContainer.style.opacity = '0';
          gameContainer.style.transform = 'scale(0.95)';
          toggleButton.textContent = 'Show Game';
          setTimeout(() => { gameContainer.style.display = 'none'; }, 300);
        } else {
          gameContainer.style.display = 'block';
          setTimeout(() => {
            gameContainer.style.opacity = '1';
            gameContainer.style.transform = 'scale(1)';
          }, 10);
          toggleButton.textContent = 'Hide Game';
        }
      };
    })();
"""

_DRAMATIC_LIGHTING = """
    // --- JS for Dramatic Lighting ---
    // Updates CSS variables with mouse coordinates for the spotlight effect.
    window.addEventListener('mousemove', (e) => {
      document.documentElement.style.setProperty('--mouse-x', e.clientX + 'px');
      document.documentElement.style.setProperty('--mouse-y', e.clientY + 'px');
    });
"""

_CHRISTMAS_SNOW = """
    // --- Feature: Christmas Snow (Canvas) ---
    // Renders a layered snow effect on a canvas.
    (function setupSnowCanvas() {
      const canvas = document.createElement('canvas');
      const ctx = canvas.getContext('2d');
      document.body.appendChild(canvas);

      Object.assign(canvas.style, {
        position: 'fixed',
        top: 0,
        left: 0,
        width: '100vw',
        height: '100vh',
        pointerEvents: 'none',
        zIndex: '9991'
      });

      let width = canvas.width = window.innerWidth;
      let height = canvas.height = window.innerHeight;
      const flakes = [];

      window.addEventListener('resize', () => {
        width = canvas.width = window.innerWidth;
        height = canvas.height = window.innerHeight;
      });

      function addFlake() {
        flakes.push({
          x: Math.random() * width,
          y: -10,
          radius: 2 + Math.random() * 3,
          speed: 1 + Math.random() * 2,
          swing: Math.random() * 0.03 - 0.015,
          angle: Math.random() * Math.PI * 2
        });
      }

      function drawFlakes() {
        ctx.clearRect(0, 0, width, height);
        ctx.fillStyle = 'rgba(255, 255, 255, 0.8)';
        ctx.beginPath();

        for (let i = 0; i < flakes.length; i++) {
          const flake = flakes[i];
          flake.y += flake.speed;
          flake.angle += flake.swing;
          flake.x += Math.sin(flake.angle) * 0.5;

          if (flake.y > height + 10) {
            flakes.splice(i, 1);
            i--;
            continue;
          }
          ctx.moveTo(flake.x, flake.y);
          ctx.arc(flake.x, flake.y, flake.radius, 0, Math.PI * 2);
        }
        ctx.fill();

        if (flakes.length < 200) {
          addFlake();
        }

        requestAnimationFrame(drawFlakes);
      }

      drawFlakes();
    })();
"""

_CHRISTMAS_CURSOR = """
    // --- Feature: Christmas Cursor Trail ---
    // Leaves a short trail of fading sparkles behind the cursor.
    (function setupChristmasCursor() {
      const symbols = ['❄', '✦', '★', '❅'];
      const colors = ['#ffffff', '#ff4d4d', '#4ade80', '#facc15'];
      let last = 0;
      window.addEventListener('mousemove', (e) => {
        const now = Date.now();
        if (now - last < 40) return;
        last = now;
        const sparkle = document.createElement('span');
        sparkle.className = 'christmas-sparkle';
        sparkle.textContent = symbols[Math.floor(Math.random() * symbols.length)];
        sparkle.style.left = e.clientX + 'px';
        sparkle.style.top = e.clientY + 'px';
        sparkle.style.color = colors[Math.floor(Math.random() * colors.length)];
        document.body.appendChild(sparkle);
        setTimeout(() => sparkle.remove(), 1000);
      });
    })();
"""

_CHRISTMAS_CURSOR_CSS = """\
/* Styles for Christmas Cursor Trail */
@keyframes sparkle-fall {
  from { opacity: 1; transform: translate(-50%, -50%) scale(1); }
  to { opacity: 0; transform: translate(-50%, 20px) scale(0.4); }
}
.christmas-sparkle {
    position: fixed;
    pointer-events: none;
    z-index: 10001;
    font-size: 14px;
    transform: translate(-50%, -50%);
    animation: sparkle-fall 1s ease-out forwards;
}"""


FEATURES: list[Feature] = [
    Feature("enable_cinematic_mode", "Cinematic Mode",
            call="createCinematicToggleButton();", helper=_CINEMATIC_HELPER, css=_CINEMATIC_CSS),
    Feature("enable_mouse_follower", "Mouse Follower",
            call="createMouseFollower();", helper=_MOUSE_FOLLOWER_HELPER, css=_MOUSE_FOLLOWER_CSS),
    Feature("enable_random_theme_button", "Random Theme Button",
            call="createRandomThemeButton();", helper=_RANDOM_THEME_HELPER, css=_RANDOM_THEME_CSS),
    Feature("enable_videowrap_shake", "Videowrap Shake",
            call="setupVideowrapShake();", helper=_SHAKE_HELPER, css=_SHAKE_CSS),
    Feature("enable_video_follow_cursor", "3D Video Player Tilt",
            call="setupVideoFollowCursor();", helper=_TILT_HELPER, css=_TILT_CSS),
    Feature("enable_glowy_grid", "Interactive Glowing Grid", code=_GLOWY_GRID),
    Feature("enable_matrix_rain", "Matrix Rain", code=_MATRIX_RAIN),
    Feature("enable_floating_images", "Floating Images", code=_floating_images),
    Feature("enable_simpsons_game", "Simpsons Arcade Game", code=_SIMPSONS_GAME),
    Feature("dramatic_lighting", "Dramatic Lighting (spotlight tracking)",
            section="css_effects", code=_DRAMATIC_LIGHTING),
    Feature("enable_christmas_snow", "Christmas Snow (Canvas)", code=_CHRISTMAS_SNOW),
    Feature("enable_christmas_cursor", "Christmas Cursor Trail",
            code=_CHRISTMAS_CURSOR, css=_CHRISTMAS_CURSOR_CSS),
]


def enabled_features(theme: ThemeConfig) -> list[Feature]:
    return [feature for feature in FEATURES if feature.enabled(theme)]
