import cv2


class CameraUnavailableError(IOError):
    pass


class InputModule:
    """Webcam capture device. Nothing is opened until start() is called."""

    def __init__(self, camera_index=0, width=320, height=240):
        self.camera_index = camera_index
        self.width = width
        self.height = height
        self.cap = None

    def start(self):
        if self.cap is not None:
            return
        cap = cv2.VideoCapture(self.camera_index)
        if not cap.isOpened():
            cap.release()
            raise CameraUnavailableError(f"Cannot open camera {self.camera_index}")
        cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.width)
        cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.height)
        self.cap = cap

    def get_frame(self):
        if self.cap is None:
            return None
        success, frame = self.cap.read()
        if not success or frame is None:
            print("Ignoring empty camera frame.")
            return None
        if frame.shape[1] == 0:
            print("Warning: Frame has zero width.")
            return None
        return frame

    def release(self):
        if self.cap is not None:
            self.cap.release()
            self.cap = None
