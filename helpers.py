# helpers.py

import cv2

FONT = cv2.FONT_HERSHEY_SIMPLEX


def clamp(value, low, high):
    return max(low, min(high, value))


def smooth_towards(current, target, alpha):
    """Exponential smoothing step: move `current` a fraction `alpha` of the way to `target`."""
    return current + (target - current) * alpha


def boxes_overlap(a, b):
    """
    Axis-aligned bounding box test.

    Args:
        a, b: (x, y, width, height) tuples with (x, y) the top-left corner.

    Returns:
        True if the open rectangles intersect. Boxes that only share an edge
        do not overlap.
    """
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def draw_centered_text(frame, text, center_x, baseline_y, font_scale, color, thickness):
    text_size, _ = cv2.getTextSize(text, FONT, font_scale, thickness)
    text_x = int(center_x - text_size[0] // 2)
    cv2.putText(frame, text, (text_x, int(baseline_y)), FONT, font_scale, color, thickness, cv2.LINE_AA)
    return text_size


def draw_panel(frame, top_left, bottom_right, color, alpha=0.85):
    """Draws a filled, semi-transparent rectangle onto the frame in place."""
    h, w = frame.shape[:2]
    x1, y1 = max(int(top_left[0]), 0), max(int(top_left[1]), 0)
    x2, y2 = min(int(bottom_right[0]), w), min(int(bottom_right[1]), h)
    if x2 <= x1 or y2 <= y1:
        return frame
    roi = frame[y1:y2, x1:x2]
    overlay = roi.copy()
    overlay[:] = color
    frame[y1:y2, x1:x2] = cv2.addWeighted(overlay, alpha, roi, 1 - alpha, 0)
    return frame
